from .client_site import ClientSite
from .client_page import ClientPage, PAGE_TYPES
from .client_component import ClientComponent
from .client_page_version import ClientPageVersion

__all__ = [
    "ClientSite",
    "ClientPage",
    "PAGE_TYPES",
    "ClientComponent",
    "ClientPageVersion",
]

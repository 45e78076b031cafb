from typing import List, Optional
from pagehost.models.client_page import ClientPage
from .resolve_page import get_client_site


def list_client_pages(
    *,
    tenant_slug: str,
    include_unpublished: bool = False,
    category: Optional[str] = None,
) -> List[ClientPage]:
    client = get_client_site(tenant_slug)
    if not client:
        return []

    query = ClientPage.query.filter_by(client_id=client.id)

    if category:
        query = query.filter_by(category=category)

    if not include_unpublished:
        query = query.filter_by(is_published=True)

    return query.order_by(ClientPage.sort_order.asc(), ClientPage.created_at.asc()).all()


def list_listing_items(*, tenant_slug: str, listing) -> List[ClientPage]:
    """
    Published pages a listing page links to: same category, excluding the
    listing itself and any other listing pages.
    """
    if not listing.category:
        return []

    pages = list_client_pages(tenant_slug=tenant_slug, category=listing.category)

    return [
        page for page in pages
        if page.id != listing.id and not page.is_listing
    ]

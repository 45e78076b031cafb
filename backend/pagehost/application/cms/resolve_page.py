# pagehost/application/cms/resolve_page.py
from typing import Optional
from flask import current_app
from pagehost.models.client_site import ClientSite
from pagehost.models.client_page import ClientPage
from pagehost.domain.content import ResolvedPage, effective_content
from pagehost.domain.exceptions import ContentNotFound

HOME_PAGE_SLUGS = ("home", "index")


def get_client_site(slug: Optional[str]) -> Optional[ClientSite]:
    """Active client site by slug, or None."""
    if not slug:
        return None

    return ClientSite.query.filter_by(slug=slug, is_active=True).first()


def find_client_page(
    *,
    tenant_slug: str,
    page_slug: str,
    category: Optional[str] = None,
) -> Optional[ClientPage]:
    """
    Raw page row regardless of publish state.

    Without a category the slug is matched across all categories; the
    lowest sort_order wins if it is ambiguous.
    """
    client = get_client_site(tenant_slug)
    if not client:
        return None

    return _lookup_page(client, page_slug, category)


def _lookup_page(client, page_slug, category=None):
    query = ClientPage.query.filter_by(client_id=client.id, slug=page_slug)
    if category:
        query = query.filter_by(category=category)

    return query.order_by(ClientPage.sort_order.asc(), ClientPage.created_at.asc()).first()


def resolve_page(
    *,
    tenant_slug: str,
    page_slug: str,
    category: Optional[str] = None,
    preview: bool = False,
) -> ResolvedPage:
    """
    Resolve the content a visitor (or a previewing editor) should see.

    Rules:
    - Inactive or unknown client -> ContentNotFound
    - Unpublished page outside preview -> ContentNotFound
    - Preview of a page with a draft -> field-level draft override
    """
    client = get_client_site(tenant_slug)
    if not client:
        raise ContentNotFound("Client not found")

    page = _lookup_page(client, page_slug, category)
    if not page:
        raise ContentNotFound("Page not found")

    if not page.is_published and not preview:
        raise ContentNotFound("Page not found")

    is_preview = preview and page.has_draft

    return ResolvedPage(
        page=page,
        content=effective_content(page, preview=preview),
        is_preview=is_preview,
    )


def resolve_home_page(*, tenant_slug: str, preview: bool = False) -> ResolvedPage:
    """
    Home page lookup order: the is_home_page flag, then slug "home",
    then slug "index".
    """
    client = get_client_site(tenant_slug)
    if not client:
        raise ContentNotFound("Client not found")

    flagged = (
        ClientPage.query
        .filter_by(client_id=client.id, is_home_page=True)
        .order_by(ClientPage.sort_order.asc())
        .first()
    )

    candidates = []
    if flagged:
        candidates.append((flagged.slug, flagged.category))
    candidates.extend((slug, None) for slug in HOME_PAGE_SLUGS)

    for slug, category in candidates:
        try:
            return resolve_page(
                tenant_slug=tenant_slug,
                page_slug=slug,
                category=category,
                preview=preview,
            )
        except ContentNotFound:
            current_app.logger.debug("Home page candidate %r not resolvable for %s", slug, tenant_slug)

    raise ContentNotFound("Home page not found")

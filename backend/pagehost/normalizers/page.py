from pagehost.domain.content import OVERRIDABLE_FIELDS, draft_field, effective_content
from .common import iso


def normalize_page(page, content=None, admin=False, is_preview=False):
    """
    Public shape of a page.

    `content` is the effective view (see effective_content); draft columns
    only appear under "draft" for admin callers.
    """
    if content is None:
        content = effective_content(page)

    data = {
        "id": page.id,
        "client_id": page.client_id,
        "slug": page.slug,
        "category": page.category,
        "title": page.title,
        "excerpt": page.excerpt,
        "featured_image": page.featured_image,
        "author": page.author,
        "published_date": iso(page.published_date),
        "page_type": page.page_type,
        "sort_order": page.sort_order,
        "is_published": page.is_published,
        "is_home_page": page.is_home_page,
        "has_draft": page.has_draft,
        "use_client_header": page.use_client_header,
        "use_client_footer": page.use_client_footer,
        "published_at": iso(page.published_at),
        "updated_at": iso(page.updated_at),
        "is_preview": is_preview,
    }
    data.update(content)

    if admin:
        data["published_by"] = page.published_by
        data["created_at"] = iso(page.created_at)
        data["draft"] = {
            name: getattr(page, draft_field(name)) for name in OVERRIDABLE_FIELDS
        }

    return data


def normalize_resolved_page(resolved, admin=False):
    return normalize_page(
        resolved.page,
        content=resolved.content,
        admin=admin,
        is_preview=resolved.is_preview,
    )

from datetime import date
from typing import Any, Dict
from dateutil.parser import parse, ParserError
from flask import current_app
from sqlalchemy.exc import IntegrityError
from pagehost.extensions import db
from pagehost.models.client_page import ClientPage, PAGE_TYPES
from pagehost.domain.content import OVERRIDABLE_FIELDS
from pagehost.domain.exceptions import ContentConflict, ContentNotFound, ValidationError
from pagehost.utils.transaction import transactional
from .resolve_page import get_client_site


TEXT_FIELDS = ("title", "category", "excerpt", "featured_image", "author") + OVERRIDABLE_FIELDS
FLAG_FIELDS = ("is_published", "is_home_page", "use_client_header", "use_client_footer")


def _parse_date(value) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse(str(value)).date()
    except (ParserError, ValueError, OverflowError) as exc:
        raise ValidationError("published_date must be a valid date") from exc


def _check_text_fields(data: Dict[str, Any]) -> None:
    for name in ("slug",) + TEXT_FIELDS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"Field '{name}' must be a string or null")


def create_page(*, tenant_slug: str, data: Dict[str, Any]) -> ClientPage:
    """
    Insert a new page for a client. Pages start without a draft.

    Edge cases handled:
    - Missing slug
    - Non-string slug or text fields
    - Unknown page_type
    - Duplicate slug within the same client and category
    - A new home page takes the flag from the previous one
    """
    client = get_client_site(tenant_slug)
    if not client:
        raise ContentNotFound("Client not found")

    _check_text_fields(data)

    slug = (data.get("slug") or "").strip().strip("/")
    if not slug or "/" in slug:
        raise ValidationError("A slug without '/' is required")

    page_type = data.get("page_type") or "normal"
    if page_type not in PAGE_TYPES:
        raise ValidationError(f"page_type must be one of: {', '.join(PAGE_TYPES)}")

    category = data.get("category") or None

    existing = ClientPage.query.filter_by(
        client_id=client.id,
        category=category,
        slug=slug,
    ).first()
    if existing:
        raise ContentConflict("A page with this slug already exists")

    page = ClientPage()
    page.client_id = client.id
    page.slug = slug
    page.page_type = page_type
    page.has_draft = False

    for name in TEXT_FIELDS:
        if name in data:
            setattr(page, name, data[name])
    page.category = category

    for name in FLAG_FIELDS:
        if name in data:
            setattr(page, name, bool(data[name]))

    if data.get("sort_order") is not None:
        try:
            page.sort_order = int(data["sort_order"])
        except (TypeError, ValueError) as exc:
            raise ValidationError("sort_order must be an integer") from exc

    if data.get("published_date"):
        page.published_date = _parse_date(data["published_date"])

    try:
        with transactional():
            if page.is_home_page:
                ClientPage.query.filter_by(
                    client_id=client.id,
                    is_home_page=True,
                ).update({"is_home_page": False})

            db.session.add(page)
            db.session.flush()  # ensures page.id is available

    except IntegrityError as exc:
        # Unique constraint on (client_id, category, slug)
        raise ContentConflict("A page with this slug already exists") from exc

    current_app.logger.info("Created page %s/%s (%s)", tenant_slug, slug, page.id)
    return page

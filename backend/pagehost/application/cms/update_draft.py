from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from pagehost.extensions import db
from pagehost.models.base import utc_now
from pagehost.models.client_page import ClientPage
from pagehost.domain.content import DRAFT_FIELDS
from pagehost.domain.exceptions import ValidationError
from pagehost.domain.lifecycle.page import LifecycleResult
from pagehost.utils.transaction import transactional


ALLOWED_DRAFT_FIELDS = frozenset(DRAFT_FIELDS)


def validate_draft_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Only the *_draft content columns are writable through a draft update.
    Publish flags, ownership and timestamps are rejected.
    """
    if not isinstance(fields, dict) or not fields:
        raise ValidationError("No draft fields provided for update")

    unknown = sorted(set(fields) - ALLOWED_DRAFT_FIELDS)
    if unknown:
        raise ValidationError(
            f"Fields not allowed in a draft update: {', '.join(unknown)}",
            details={"allowed": sorted(ALLOWED_DRAFT_FIELDS)},
        )

    for name, value in fields.items():
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"Field '{name}' must be a string or null")

    return dict(fields)


def update_draft(*, page_id: str, fields: Dict[str, Any]) -> LifecycleResult:
    """
    Merge draft values into a page and flag it as carrying a draft.

    Validation errors raise; datastore failures are reported through
    the returned LifecycleResult.
    """
    updates = validate_draft_fields(fields)

    try:
        with transactional():
            page = db.session.get(ClientPage, page_id)
            if not page:
                return LifecycleResult.not_found(page_id)

            for name, value in updates.items():
                setattr(page, name, value)

            page.has_draft = True
            page.updated_at = utc_now()

    except SQLAlchemyError as exc:
        current_app.logger.exception("Error updating page draft %s", page_id)
        return LifecycleResult.transport_error(
            page_id, "Failed to update page draft", detail=str(exc)
        )

    current_app.logger.info("Draft updated for page %s (%s)", page_id, ", ".join(sorted(updates)))
    return LifecycleResult.success(page_id, message="Page draft updated successfully")

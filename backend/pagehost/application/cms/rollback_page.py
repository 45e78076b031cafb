# pagehost/application/cms/rollback_page.py
from typing import List, Optional
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from pagehost.datastore import procedures
from pagehost.models.client_page_version import ClientPageVersion
from pagehost.domain.exceptions import ContentNotFound
from pagehost.domain.lifecycle.page import LifecycleResult


def list_page_versions(*, page_id: str) -> List[ClientPageVersion]:
    """Version history, newest first."""
    return (
        ClientPageVersion.query
        .filter_by(page_id=page_id)
        .order_by(ClientPageVersion.version_number.desc())
        .all()
    )


def rollback_page(
    *,
    page_id: str,
    version_number: int,
    actor_id: Optional[str] = None,
) -> LifecycleResult:
    """
    Roll a page's published content back to a previous version.

    The restore is recorded as a new version; the returned result carries
    its number.
    """
    if version_number < 1:
        return LifecycleResult.not_found(page_id, f"Version {version_number} not found")

    try:
        outcome = procedures.rollback_to_version(page_id, version_number, actor_id)
    except ContentNotFound as exc:
        return LifecycleResult.not_found(page_id, exc.message)
    except SQLAlchemyError as exc:
        current_app.logger.exception(
            "Error rolling back page %s to version %s", page_id, version_number
        )
        return LifecycleResult.transport_error(
            page_id, "Failed to roll back page", detail=str(exc)
        )

    current_app.logger.info(
        "Rolled back page %s to version %s (new version %s)",
        page_id, version_number, outcome["new_version"],
    )
    return LifecycleResult.success(
        page_id,
        version=outcome["new_version"],
        message=f"Rolled back to version {version_number}",
    )

from typing import Optional
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from pagehost.datastore import procedures
from pagehost.domain.exceptions import ContentNotFound, NoDraftChanges
from pagehost.domain.lifecycle.page import LifecycleResult


def publish_draft(*, page_id: str, publisher_id: Optional[str] = None) -> LifecycleResult:
    """
    Promote a page's draft to published content.

    Responsibilities:
    - delegate to the atomic publish procedure
    - translate its failures into a LifecycleResult
    - logging
    """
    try:
        outcome = procedures.publish_page_draft(page_id, publisher_id)
    except ContentNotFound as exc:
        return LifecycleResult.not_found(page_id, exc.message)
    except NoDraftChanges as exc:
        current_app.logger.info("Publish skipped for page %s: no draft", page_id)
        return LifecycleResult.conflict(page_id, exc.message)
    except SQLAlchemyError as exc:
        current_app.logger.exception("Error publishing page draft %s", page_id)
        return LifecycleResult.transport_error(
            page_id, "Failed to publish page draft", detail=str(exc)
        )

    current_app.logger.info(
        "Published page %s as version %s (publisher=%s)",
        page_id, outcome["version"], publisher_id,
    )
    return LifecycleResult.success(
        page_id,
        version=outcome["version"],
        message="Page published successfully",
    )

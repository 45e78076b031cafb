from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from pagehost.datastore import procedures
from pagehost.domain.exceptions import ContentNotFound, NoDraftChanges
from pagehost.domain.lifecycle.page import LifecycleResult


def discard_draft(*, page_id: str) -> LifecycleResult:
    try:
        procedures.discard_page_draft(page_id)
    except ContentNotFound as exc:
        return LifecycleResult.not_found(page_id, exc.message)
    except NoDraftChanges as exc:
        return LifecycleResult.conflict(page_id, exc.message)
    except SQLAlchemyError as exc:
        current_app.logger.exception("Error discarding page draft %s", page_id)
        return LifecycleResult.transport_error(
            page_id, "Failed to discard page draft", detail=str(exc)
        )

    current_app.logger.info("Discarded draft for page %s", page_id)
    return LifecycleResult.success(page_id, message="Draft changes discarded successfully")

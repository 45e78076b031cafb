from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from pagehost.domain.exceptions import NoDraftChanges


class LifecycleStatus(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    TRANSPORT_ERROR = "transport_error"


# HTTP status each outcome maps to at the route layer
STATUS_CODES: Dict[LifecycleStatus, int] = {
    LifecycleStatus.SUCCESS: 200,
    LifecycleStatus.NOT_FOUND: 404,
    LifecycleStatus.CONFLICT: 400,
    LifecycleStatus.TRANSPORT_ERROR: 500,
}


@dataclass(frozen=True)
class LifecycleResult:
    """
    Outcome of a draft lifecycle operation.

    CONFLICT covers idempotent no-ops (nothing to publish or discard),
    TRANSPORT_ERROR covers datastore failures.
    """
    status: LifecycleStatus
    page_id: Optional[str] = None
    message: Optional[str] = None
    version: Optional[int] = None
    # Raw datastore error text; only surfaced when EXPOSE_ERROR_DETAILS is on
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is LifecycleStatus.SUCCESS

    @property
    def http_status(self) -> int:
        return STATUS_CODES[self.status]

    @classmethod
    def success(cls, page_id: str, *, version: Optional[int] = None, message: Optional[str] = None):
        return cls(LifecycleStatus.SUCCESS, page_id=page_id, version=version, message=message)

    @classmethod
    def not_found(cls, page_id: Optional[str], message: str = "Page not found"):
        return cls(LifecycleStatus.NOT_FOUND, page_id=page_id, message=message)

    @classmethod
    def conflict(cls, page_id: Optional[str], message: str):
        return cls(LifecycleStatus.CONFLICT, page_id=page_id, message=message)

    @classmethod
    def transport_error(cls, page_id: Optional[str], message: str, *, detail: Optional[str] = None):
        return cls(LifecycleStatus.TRANSPORT_ERROR, page_id=page_id, message=message, detail=detail)


def assert_has_draft(page, *, action: str) -> None:
    """
    Guards publish/discard: both are meaningless without pending changes.
    """
    if not page.has_draft:
        raise NoDraftChanges(
            f"No draft changes to {action}",
            details="This page has no unpublished changes",
        )

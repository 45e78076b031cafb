# pagehost/datastore/procedures.py
"""
Atomic page procedures.

Each procedure runs in one transaction, locks the page row
(SELECT ... FOR UPDATE where the backend supports it), re-checks its
precondition under that lock and commits or rolls back as a whole.
Concurrent callers on the same page are serialised by the row lock; the
loser of a publish/discard race sees NoDraftChanges.
"""
from typing import Dict, Optional
from sqlalchemy import select
from pagehost.extensions import db
from pagehost.models.base import utc_now
from pagehost.models.client_page import ClientPage
from pagehost.models.client_page_version import ClientPageVersion
from pagehost.domain.content import DRAFT_FIELDS, OVERRIDABLE_FIELDS, draft_field
from pagehost.domain.exceptions import ContentNotFound
from pagehost.domain.lifecycle.page import assert_has_draft
from pagehost.utils.transaction import transactional
from pagehost.utils.versioning import snapshot_page, restore_snapshot, next_version


def _lock_page(page_uuid: str) -> ClientPage:
    page = (
        db.session.execute(
            select(ClientPage)
            .where(ClientPage.id == page_uuid)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        .scalar_one_or_none()
    )
    if not page:
        raise ContentNotFound("Page not found")
    return page


def _clear_draft(page: ClientPage) -> None:
    for name in DRAFT_FIELDS:
        setattr(page, name, None)
    page.has_draft = False


def _append_version(page: ClientPage, *, status: str, created_by: Optional[str]) -> ClientPageVersion:
    version = ClientPageVersion()
    version.page_id = page.id
    version.version_number = next_version(page.id)
    version.status = status
    version.snapshot = snapshot_page(page)
    version.created_by = created_by

    db.session.add(version)
    db.session.flush()  # ensures version_number is persisted before commit
    return version


def publish_page_draft(page_uuid: str, publisher_id: Optional[str] = None) -> Dict[str, int]:
    """
    Promote draft content to published and record a version.

    Field-level promotion: an empty draft value keeps the published one,
    so the result matches what preview mode showed.
    """
    with transactional():
        page = _lock_page(page_uuid)
        assert_has_draft(page, action="publish")

        for name in OVERRIDABLE_FIELDS:
            value = getattr(page, draft_field(name))
            if value:
                setattr(page, name, value)

        _clear_draft(page)
        page.is_published = True
        page.published_at = utc_now()
        page.published_by = publisher_id

        version = _append_version(page, status="published", created_by=publisher_id)

    return {"page_id": page.id, "version": version.version_number}


def discard_page_draft(page_uuid: str) -> Dict[str, str]:
    """Drop all draft values; published content is left untouched."""
    with transactional():
        page = _lock_page(page_uuid)
        assert_has_draft(page, action="discard")
        _clear_draft(page)

    return {"page_id": page.id}


def rollback_to_version(page_uuid: str, version_num: int, actor_id: Optional[str] = None) -> Dict[str, int]:
    """
    Restore a historical snapshot as the published content.

    Pending drafts are dropped and the restore is itself recorded as a
    new `rollback` version, so history only ever grows.
    """
    with transactional():
        page = _lock_page(page_uuid)

        target = ClientPageVersion.query.filter_by(
            page_id=page.id,
            version_number=version_num
        ).first()

        if not target:
            raise ContentNotFound(f"Version {version_num} not found")

        restore_snapshot(page, target.snapshot)
        _clear_draft(page)

        version = _append_version(page, status="rollback", created_by=actor_id)

    return {
        "page_id": page.id,
        "from_version": version_num,
        "new_version": version.version_number,
    }

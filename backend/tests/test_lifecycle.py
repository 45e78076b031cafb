"""
Tests for the draft lifecycle: draft updates, publish, discard, rollback.
"""
import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from pagehost.application.cms.discard_draft import discard_draft
from pagehost.application.cms.publish_draft import publish_draft
from pagehost.application.cms.resolve_page import find_client_page, resolve_page
from pagehost.application.cms.rollback_page import list_page_versions, rollback_page
from pagehost.application.cms.update_draft import update_draft
from pagehost.datastore import procedures
from pagehost.domain.content import DRAFT_FIELDS
from pagehost.domain.exceptions import NoDraftChanges, ValidationError
from pagehost.domain.lifecycle.page import LifecycleStatus
from pagehost.extensions import db
from pagehost.models import ClientPageVersion


class TestUpdateDraft:

    def test_sets_draft_and_flag(self, acme, make_page):
        page = make_page(acme, "pricing", html_content="<p>old</p>")
        before = page.updated_at

        result = update_draft(page_id=page.id, fields={"html_content_draft": "<p>new</p>"})

        assert result.ok
        assert page.has_draft is True
        assert page.html_content_draft == "<p>new</p>"
        assert page.html_content == "<p>old</p>"
        assert page.updated_at >= before

    def test_rejects_fields_outside_allow_list(self, acme, make_page):
        page = make_page(acme, "pricing", is_published=False)

        with pytest.raises(ValidationError) as exc:
            update_draft(page_id=page.id, fields={"is_published": True, "html_content_draft": "x"})

        assert "is_published" in exc.value.message
        db.session.refresh(page)
        assert page.is_published is False
        assert page.has_draft is False
        assert page.html_content_draft is None

    def test_rejects_empty_payload_and_non_strings(self, acme, make_page):
        page = make_page(acme, "pricing")

        with pytest.raises(ValidationError):
            update_draft(page_id=page.id, fields={})

        with pytest.raises(ValidationError):
            update_draft(page_id=page.id, fields={"meta_title_draft": 42})

    def test_unknown_page(self, app):
        result = update_draft(page_id="missing", fields={"meta_title_draft": "x"})
        assert result.status is LifecycleStatus.NOT_FOUND


class TestPublish:

    def test_acme_about_example(self, about_page):
        assert resolve_page(tenant_slug="acme", page_slug="about", preview=True).content["meta_title"] == "About Our Company."
        assert resolve_page(tenant_slug="acme", page_slug="about").content["meta_title"] == "About Us"

        result = publish_draft(page_id=about_page.id, publisher_id="editor-9")

        assert result.ok
        assert result.version == 1

        live = resolve_page(tenant_slug="acme", page_slug="about")
        assert live.content["meta_title"] == "About Our Company."
        assert live.content["html_content"] == "<h1>About our company</h1>"

        preview = resolve_page(tenant_slug="acme", page_slug="about", preview=True)
        assert preview.has_draft is False
        assert preview.content == live.content

    def test_empty_draft_fields_keep_published_values(self, about_page):
        publish_draft(page_id=about_page.id)

        assert about_page.css_content == "h1 { color: red; }"
        assert about_page.meta_description == "Who we are"
        assert all(getattr(about_page, name) is None for name in DRAFT_FIELDS)

    def test_publish_makes_page_live_and_stamps_publisher(self, acme, make_page):
        page = make_page(acme, "launch", is_published=False)
        update_draft(page_id=page.id, fields={"html_content_draft": "<p>ready</p>"})

        publish_draft(page_id=page.id, publisher_id="editor-2")

        assert page.is_published is True
        assert page.published_by == "editor-2"
        assert page.published_at is not None
        assert resolve_page(tenant_slug="acme", page_slug="launch").content["html_content"] == "<p>ready</p>"

    def test_records_version_snapshot(self, about_page):
        publish_draft(page_id=about_page.id, publisher_id="editor-9")

        versions = list_page_versions(page_id=about_page.id)
        assert len(versions) == 1
        assert versions[0].status == "published"
        assert versions[0].created_by == "editor-9"
        assert versions[0].snapshot["meta_title"] == "About Our Company."

    def test_without_draft_is_conflict(self, acme, make_page):
        page = make_page(acme, "static")

        result = publish_draft(page_id=page.id)

        assert result.status is LifecycleStatus.CONFLICT
        assert result.http_status == 400
        assert list_page_versions(page_id=page.id) == []

    def test_unknown_page(self, app):
        assert publish_draft(page_id="missing").status is LifecycleStatus.NOT_FOUND

    def test_datastore_failure_is_transport_error(self, about_page, monkeypatch):
        def broken(*args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("connection reset"))

        monkeypatch.setattr(procedures, "publish_page_draft", broken)

        result = publish_draft(page_id=about_page.id)

        assert result.status is LifecycleStatus.TRANSPORT_ERROR
        assert result.http_status == 500
        assert "connection reset" in result.detail
        assert result.message == "Failed to publish page draft"

    def test_procedure_rechecks_draft_under_lock(self, acme, make_page):
        page = make_page(acme, "static")
        with pytest.raises(NoDraftChanges):
            procedures.publish_page_draft(page.id)

    def test_lock_reads_fresh_row_over_loaded_page(self, about_page):
        # Another writer cleared the draft after this session loaded the page
        page = find_client_page(tenant_slug="acme", page_slug="about")
        with db.engine.begin() as conn:
            conn.execute(
                text("UPDATE client_pages SET has_draft = 0 WHERE id = :id"),
                {"id": page.id},
            )

        with pytest.raises(NoDraftChanges):
            procedures.publish_page_draft(page.id)

        assert list_page_versions(page_id=page.id) == []
        assert page.meta_title == "About Us"


class TestDiscard:

    def test_clears_draft_and_keeps_published(self, about_page):
        result = discard_draft(page_id=about_page.id)

        assert result.ok
        assert about_page.has_draft is False
        assert all(getattr(about_page, name) is None for name in DRAFT_FIELDS)
        assert about_page.meta_title == "About Us"
        assert about_page.html_content == "<h1>About</h1>"

    def test_second_discard_is_conflict(self, about_page):
        discard_draft(page_id=about_page.id)
        assert discard_draft(page_id=about_page.id).status is LifecycleStatus.CONFLICT


class TestRollback:

    def _publish(self, page, **draft):
        update_draft(page_id=page.id, fields=draft)
        return publish_draft(page_id=page.id)

    def test_restores_snapshot_as_new_version(self, acme, make_page):
        page = make_page(acme, "story", html_content="<p>v0</p>")
        self._publish(page, html_content_draft="<p>v1</p>")
        self._publish(page, html_content_draft="<p>v2</p>")

        result = rollback_page(page_id=page.id, version_number=1, actor_id="editor-3")

        assert result.ok
        assert result.version == 3
        assert page.html_content == "<p>v1</p>"

        versions = list_page_versions(page_id=page.id)
        assert [v.version_number for v in versions] == [3, 2, 1]
        assert versions[0].status == "rollback"
        assert versions[0].created_by == "editor-3"

    def test_rollback_drops_pending_draft(self, acme, make_page):
        page = make_page(acme, "story", html_content="<p>v0</p>")
        self._publish(page, html_content_draft="<p>v1</p>")
        update_draft(page_id=page.id, fields={"html_content_draft": "<p>unsaved</p>"})

        rollback_page(page_id=page.id, version_number=1)

        assert page.has_draft is False
        assert page.html_content_draft is None

    @pytest.mark.parametrize("version", [0, 7])
    def test_unknown_version(self, acme, make_page, version):
        page = make_page(acme, "story")
        result = rollback_page(page_id=page.id, version_number=version)
        assert result.status is LifecycleStatus.NOT_FOUND

    def test_versions_are_immutable(self, about_page):
        publish_draft(page_id=about_page.id)
        version = ClientPageVersion.query.filter_by(page_id=about_page.id).one()

        version.status = "tampered"
        with pytest.raises(RuntimeError):
            db.session.commit()
        db.session.rollback()

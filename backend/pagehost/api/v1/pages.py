# pagehost/api/v1/pages.py
from flask import jsonify, request
from pagehost.application.cms.create_page import create_page
from pagehost.application.cms.discard_draft import discard_draft
from pagehost.application.cms.list_pages import list_client_pages
from pagehost.application.cms.publish_draft import publish_draft
from pagehost.application.cms.resolve_page import resolve_page
from pagehost.application.cms.rollback_page import list_page_versions, rollback_page
from pagehost.application.cms.update_draft import update_draft
from pagehost.domain.exceptions import ValidationError
from pagehost.domain.lifecycle.page import assert_has_draft
from pagehost.normalizers.page import normalize_page, normalize_resolved_page
from pagehost.normalizers.version import normalize_version
from pagehost.utils.decorators import editor_required, current_actor_id
from pagehost.utils.optimistic_lock import enforce_optimistic_lock
from .helpers import query_flag, require_page, result_response
from . import v1_bp


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/clients/<slug>/pages", methods=["GET"])
def list_pages(slug):
    pages = list_client_pages(
        tenant_slug=slug,
        include_unpublished=query_flag("include_unpublished"),
        category=request.args.get("category") or None,
    )

    return jsonify({
        "success": True,
        "pages": [normalize_page(p) for p in pages],
        "count": len(pages)
    }), 200


@v1_bp.route("/clients/<slug>/pages", methods=["POST"])
@editor_required
def create_client_page(slug):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")

    page = create_page(tenant_slug=slug, data=data)

    return jsonify({
        "success": True,
        "pageId": page.id,
        "page": normalize_page(page, admin=True),
        "message": "Page created successfully"
    }), 201


@v1_bp.route("/clients/<slug>/pages/<page>", methods=["GET"])
def get_page(slug, page):
    preview = query_flag("preview")
    resolved = resolve_page(
        tenant_slug=slug,
        page_slug=page,
        category=request.args.get("category") or None,
        preview=preview,
    )

    return jsonify({
        "success": True,
        "page": normalize_resolved_page(resolved, admin=preview)
    }), 200


@v1_bp.route("/clients/<slug>/pages/<page>", methods=["PUT"])
@editor_required
def update_page_draft(slug, page):
    target = require_page(slug, page)

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(target)

    data = request.get_json(silent=True)
    result = update_draft(page_id=target.id, fields=data)

    return result_response(result)


# ------------------------
# Draft lifecycle
# ------------------------

@v1_bp.route("/clients/<slug>/pages/<page>/publish", methods=["POST"])
@editor_required
def publish_page(slug, page):
    target = require_page(slug, page)
    assert_has_draft(target, action="publish")

    data = request.get_json(silent=True) or {}
    publisher_id = current_actor_id(data.get("userId"))

    result = publish_draft(page_id=target.id, publisher_id=publisher_id)
    return result_response(result)


@v1_bp.route("/clients/<slug>/pages/<page>/discard", methods=["POST"])
@editor_required
def discard_page(slug, page):
    target = require_page(slug, page)
    assert_has_draft(target, action="discard")

    result = discard_draft(page_id=target.id)
    return result_response(result)


# ------------------------
# Versions
# ------------------------

@v1_bp.route("/clients/<slug>/pages/<page>/versions", methods=["GET"])
def list_versions(slug, page):
    target = require_page(slug, page)
    versions = list_page_versions(page_id=target.id)

    return jsonify({
        "success": True,
        "versions": [
            normalize_version(v, include_snapshot=query_flag("include_snapshot"))
            for v in versions
        ],
        "count": len(versions)
    }), 200


@v1_bp.route("/clients/<slug>/pages/<page>/rollback/<int:version>", methods=["POST"])
@editor_required
def rollback_page_version(slug, page, version):
    target = require_page(slug, page)

    data = request.get_json(silent=True) or {}
    actor_id = current_actor_id(data.get("userId"))

    result = rollback_page(page_id=target.id, version_number=version, actor_id=actor_id)
    return result_response(result)

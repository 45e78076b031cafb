from flask import current_app, jsonify, request
from pagehost.application.cms.resolve_page import find_client_page
from pagehost.domain.exceptions import ContentNotFound


def query_flag(name: str) -> bool:
    return request.args.get(name, "").strip().lower() == "true"


def require_page(slug: str, page_slug: str):
    """
    Page row for a write endpoint; publish state is ignored so editors can
    work on pages that are not live yet.
    """
    page = find_client_page(
        tenant_slug=slug,
        page_slug=page_slug,
        category=request.args.get("category") or None,
    )
    if not page:
        raise ContentNotFound("Page not found")
    return page


def result_response(result):
    """Map a LifecycleResult onto a JSON response."""
    if result.ok:
        body = {"success": True, "message": result.message, "pageId": result.page_id}
        if result.version is not None:
            body["version"] = result.version
        return jsonify(body), 200

    body = {
        "success": False,
        "error": result.message,
        "code": result.status.value,
        "pageId": result.page_id,
    }
    if result.detail and current_app.config.get("EXPOSE_ERROR_DETAILS"):
        body["details"] = result.detail
    return jsonify(body), result.http_status

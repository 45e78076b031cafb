from flask import jsonify, request
from pagehost.application.cms.resolve_page import get_client_site
from pagehost.application.cms.list_components import list_client_components
from pagehost.domain.exceptions import ContentNotFound
from pagehost.normalizers.client import normalize_client
from pagehost.normalizers.component import normalize_component
from .helpers import query_flag
from . import v1_bp


@v1_bp.route("/clients/<slug>", methods=["GET"])
def get_client(slug):
    client = get_client_site(slug)
    if not client:
        raise ContentNotFound("Client not found")

    return jsonify({
        "success": True,
        "client": normalize_client(client)
    }), 200


@v1_bp.route("/clients/<slug>/components", methods=["GET"])
def list_components(slug):
    if not get_client_site(slug):
        raise ContentNotFound("Client not found")

    components = list_client_components(
        tenant_slug=slug,
        component_type=request.args.get("type") or None,
        preview=query_flag("preview"),
    )

    return jsonify({
        "success": True,
        "components": [normalize_component(c) for c in components],
        "count": len(components)
    }), 200

from flask import current_app, redirect, request, url_for
from pagehost.application.cms.list_components import list_client_components
from pagehost.application.cms.list_pages import list_listing_items
from pagehost.application.cms.resolve_page import resolve_home_page, resolve_page
from pagehost.domain.exceptions import ContentNotFound
from .renderer import render_client_page, render_not_found
from . import site_bp


def _preview_requested() -> bool:
    return request.args.get("preview", "").strip().lower() == "true"


def _not_found():
    return render_not_found(), 404


@site_bp.route("/c/<client>/", methods=["GET"])
def client_home(client):
    preview = _preview_requested()

    try:
        home = resolve_home_page(tenant_slug=client, preview=preview)
    except ContentNotFound:
        current_app.logger.info("No home page for client %s", client)
        return _not_found()

    target = f"{home.category}/{home.slug}" if home.category else home.slug
    params = {"preview": "true"} if preview else {}
    return redirect(url_for("site.client_page", client=client, slug=target, **params), code=302)


@site_bp.route("/c/<client>/<path:slug>", methods=["GET"])
def client_page(client, slug):
    preview = _preview_requested()
    segments = [segment for segment in slug.split("/") if segment]

    if len(segments) == 1:
        category, page_slug = None, segments[0]
    elif len(segments) == 2:
        category, page_slug = segments
    else:
        current_app.logger.debug("Unsupported path depth for %s: %s", client, slug)
        return _not_found()

    try:
        resolved = resolve_page(
            tenant_slug=client,
            page_slug=page_slug,
            category=category,
            preview=preview,
        )
    except ContentNotFound:
        current_app.logger.debug("Page not found: %s/%s", client, slug)
        return _not_found()

    components = list_client_components(tenant_slug=client, preview=preview)

    related_pages = []
    if resolved.is_listing:
        related_pages = list_listing_items(tenant_slug=client, listing=resolved.page)

    current_app.logger.debug(
        "Rendering %s/%s (type=%s, preview=%s, related=%d)",
        client, slug, resolved.page.page_type, resolved.is_preview, len(related_pages),
    )

    html = render_client_page(
        resolved.page.client,
        resolved,
        components,
        related_pages,
        preview=preview,
        base_url=current_app.config.get("SITE_BASE_URL", ""),
    )
    return html, 200

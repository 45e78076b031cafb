# pagehost/site/renderer.py
"""
Composes a client page from its resolved content, the client's global
stylesheet and its header/footer components.

Stored HTML, CSS and JS are embedded verbatim: anyone with write access to
the page tables is trusted.
"""
from typing import Any, Dict, List, Optional
from flask import render_template
from pagehost.utils.html_meta import extract_head_meta

DEFAULT_FAVICON = "/favicon.ico"


def first_non_empty(*values):
    for value in values:
        if value:
            return value
    return None


def find_component(components, component_type: str):
    return next((c for c in components if c.component_type == component_type), None)


def page_path(client_slug: str, page) -> str:
    if page.category:
        return f"/c/{client_slug}/{page.category}/{page.slug}"
    return f"/c/{client_slug}/{page.slug}"


def combine_css(client, header, footer, content: Dict[str, Any]) -> str:
    """Global, header, footer and page CSS in that order, empty parts skipped."""
    parts = [
        client.global_css,
        header.css_content if header else None,
        footer.css_content if footer else None,
        content.get("css_content"),
    ]
    return "\n\n".join(part for part in parts if part)


def build_seo(client, resolved, *, base_url: str) -> Dict[str, Optional[str]]:
    """
    SEO tag values, each taking the first non-empty of the page's own
    meta fields, the head of its stored HTML and the client defaults.
    """
    page = resolved.page
    content = resolved.content
    head = extract_head_meta(content.get("html_content"))

    if resolved.is_listing and page.title:
        page_title = f"{page.title} | {client.name}"
    else:
        page_title = page.title

    title = first_non_empty(
        content.get("meta_title"),
        head["title"],
        page_title,
        client.meta_default("default_title"),
        client.name,
    )
    description = first_non_empty(
        content.get("meta_description"),
        head["description"],
        page.excerpt,
        client.meta_default("default_description"),
    ) or ""
    og_image = first_non_empty(
        content.get("og_image"),
        page.featured_image,
        client.meta_default("default_og_image"),
    ) or ""
    canonical_url = first_non_empty(
        content.get("canonical_url"),
        f"{base_url.rstrip('/')}{page_path(client.slug, page)}",
    )

    return {
        "title": title,
        "description": description,
        "keywords": content.get("meta_keywords") or "",
        "og_image": og_image,
        "og_type": "website",
        "canonical_url": canonical_url,
    }


def format_card_date(value) -> Optional[str]:
    if not value:
        return None
    return f"{value:%B} {value.day}, {value.year}"


def build_listing_cards(client, related_pages) -> List[Dict[str, Any]]:
    return [
        {
            "id": p.id,
            "href": f"/c/{client.slug}/{p.category}/{p.slug}",
            "title": p.title or p.slug,
            "excerpt": p.excerpt,
            "author": p.author,
            "date": format_card_date(p.published_date),
            "image": p.featured_image,
        }
        for p in related_pages
    ]


def build_page_context(
    client,
    resolved,
    components,
    related_pages=None,
    *,
    preview: bool = False,
    base_url: str = "",
) -> Dict[str, Any]:
    page = resolved.page
    header = find_component(components, "header")
    footer = find_component(components, "footer")

    return {
        "client": client,
        "page": page,
        "seo": build_seo(client, resolved, base_url=base_url),
        "favicon": client.favicon or DEFAULT_FAVICON,
        "combined_css": combine_css(client, header, footer, resolved.content),
        "header_html": header.html_content if (page.use_client_header and header) else None,
        "footer_html": footer.html_content if (page.use_client_footer and footer) else None,
        "page_html": resolved.content.get("html_content") or "",
        "page_js": resolved.content.get("js_content"),
        "is_preview": preview,
        "show_preview_banner": preview and resolved.is_preview,
        "live_url": page_path(client.slug, page),
        "is_listing": resolved.is_listing,
        "cards": build_listing_cards(client, related_pages or []),
    }


def render_client_page(client, resolved, components, related_pages=None, *, preview=False, base_url=""):
    context = build_page_context(
        client,
        resolved,
        components,
        related_pages,
        preview=preview,
        base_url=base_url,
    )
    return render_template("site/page.html", **context)


def render_not_found():
    return render_template("site/not_found.html")

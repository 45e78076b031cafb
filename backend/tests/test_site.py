"""
Tests for the server-rendered client pages under /c/<client>/.
"""
import datetime

import pytest

from pagehost.application.cms.resolve_page import resolve_page
from pagehost.site.renderer import build_page_context, combine_css
from pagehost.utils.html_meta import extract_head_meta


@pytest.fixture
def chrome(acme, make_component):
    header = make_component(acme, "header", html_content="<nav>Menu</nav>", css_content="nav { display: flex; }")
    footer = make_component(acme, "footer", html_content="<footer>Bye</footer>", css_content="footer { padding: 0; }")
    return header, footer


# ============== Routing ==============

def test_bare_client_redirects_to_home(client, acme, make_page):
    make_page(acme, "welcome", is_home_page=True)

    r = client.get("/c/acme/")
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/c/acme/welcome")


def test_home_redirect_keeps_preview(client, acme, make_page):
    make_page(acme, "home", is_published=False)

    r = client.get("/c/acme/?preview=true")
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/c/acme/home?preview=true")


def test_home_redirect_keeps_category(client, acme, make_page):
    make_page(acme, "start", category="guides", is_home_page=True, sort_order=5)
    make_page(acme, "start", html_content="<p>Other start</p>", sort_order=0)

    r = client.get("/c/acme/")
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/c/acme/guides/start")


def test_missing_home_is_not_found_page(client, acme):
    r = client.get("/c/acme/")
    assert r.status_code == 404
    assert b"Page Not Found" in r.data
    assert b'content="noindex"' in r.data


@pytest.mark.parametrize("path", [
    "/c/acme/missing",
    "/c/acme/a/b/c",
    "/c/nobody/about",
])
def test_not_found_paths(client, acme, path):
    r = client.get(path)
    assert r.status_code == 404
    assert b"Page Not Found" in r.data


def test_two_segment_route_uses_category(client, acme, make_page):
    make_page(acme, "gut-health", category="education", html_content="<p>Gut</p>")

    r = client.get("/c/acme/education/gut-health")
    assert r.status_code == 200
    assert b"<p>Gut</p>" in r.data

    assert client.get("/c/acme/recipes/gut-health").status_code == 404


# ============== Composition ==============

def test_page_composition(client, acme, make_page, chrome):
    make_page(
        acme,
        "about",
        html_content="<section>About</section>",
        css_content=".about { color: blue; }",
        js_content="console.log('hi');",
    )

    html = client.get("/c/acme/about").get_data(as_text=True)

    assert "<nav>Menu</nav>" in html
    assert "<footer>Bye</footer>" in html
    assert "<section>About</section>" in html
    assert "<script>console.log('hi');</script>" in html

    css_start = html.index("<style>")
    order = [html.index(part, css_start) for part in (
        "body { margin: 0; }",
        "nav { display: flex; }",
        "footer { padding: 0; }",
        ".about { color: blue; }",
    )]
    assert order == sorted(order)


def test_header_and_footer_flags(client, acme, make_page, chrome):
    make_page(acme, "bare", html_content="<p>Bare</p>", use_client_header=False, use_client_footer=False)

    html = client.get("/c/acme/bare").get_data(as_text=True)

    assert "<nav>Menu</nav>" not in html
    assert "<footer>Bye</footer>" not in html
    # Component stylesheets are still part of the combined block
    assert "nav { display: flex; }" in html


def test_combine_css_skips_empty_parts(acme):
    acme.global_css = None
    assert combine_css(acme, None, None, {"css_content": "p {}"}) == "p {}"


# ============== SEO ==============

def test_seo_prefers_page_meta_fields(client, acme, make_page):
    make_page(
        acme,
        "about",
        title="About",
        meta_title="About Us",
        meta_description="Who we are",
        og_image="https://cdn.example.com/about.png",
        html_content="<title>Ignored</title><p>x</p>",
    )

    html = client.get("/c/acme/about").get_data(as_text=True)

    assert "<title>About Us</title>" in html
    assert '<meta name="description" content="Who we are">' in html
    assert '<meta property="og:image" content="https://cdn.example.com/about.png">' in html
    assert '<link rel="canonical" href="https://pages.example.com/c/acme/about">' in html


def test_seo_falls_back_to_stored_html_head(acme, make_page):
    make_page(
        acme,
        "raw",
        html_content=(
            "<html><head><title> Raw Title </title>"
            '<meta name="Description" content="Raw description"></head>'
            "<body>x</body></html>"
        ),
    )
    resolved = resolve_page(tenant_slug="acme", page_slug="raw")

    seo = build_page_context(acme, resolved, [], base_url="https://pages.example.com")["seo"]

    assert seo["title"] == "Raw Title"
    assert seo["description"] == "Raw description"


def test_seo_falls_back_to_client_defaults(acme, make_page):
    make_page(acme, "plain", html_content="<p>No head here</p>")
    resolved = resolve_page(tenant_slug="acme", page_slug="plain")

    seo = build_page_context(acme, resolved, [], base_url="https://pages.example.com/")["seo"]

    assert seo["title"] == "Acme Default"
    assert seo["description"] == "Acme makes everything."
    assert seo["og_image"] == "https://cdn.example.com/acme.png"
    assert seo["canonical_url"] == "https://pages.example.com/c/acme/plain"


def test_extract_head_meta_handles_empty_html():
    assert extract_head_meta(None) == {"title": None, "description": None}
    assert extract_head_meta("<p>fragment</p>") == {"title": None, "description": None}


# ============== Preview ==============

def test_preview_shows_draft_with_banner(client, about_page):
    html = client.get("/c/acme/about?preview=true").get_data(as_text=True)

    assert "<h1>About our company</h1>" in html
    assert "<title>About Our Company.</title>" in html
    assert "PREVIEW MODE" in html
    assert 'content="noindex, nofollow"' in html
    assert 'rel="canonical"' not in html


def test_live_page_has_no_preview_markers(client, about_page):
    html = client.get("/c/acme/about").get_data(as_text=True)

    assert "<h1>About</h1>" in html
    assert "PREVIEW MODE" not in html
    assert "nofollow" not in html


def test_preview_of_page_without_draft_has_no_banner(client, acme, make_page):
    make_page(acme, "static", html_content="<p>static</p>")
    html = client.get("/c/acme/static?preview=true").get_data(as_text=True)

    assert "PREVIEW MODE" not in html
    assert 'content="noindex, nofollow"' in html


# ============== Listing ==============

def test_listing_page_renders_cards(client, acme, make_page):
    make_page(acme, "education", category="education", page_type="listing", title="Education", html_content="<h1>Learn</h1>")
    make_page(
        acme,
        "gut-health",
        category="education",
        title="Gut Health Basics",
        excerpt="Start here",
        author="Dr. Ada",
        published_date=datetime.date(2024, 3, 5),
        sort_order=1,
    )
    make_page(acme, "hidden", category="education", title="Hidden", is_published=False)

    html = client.get("/c/acme/education/education").get_data(as_text=True)

    assert "<h1>Learn</h1>" in html
    assert 'href="/c/acme/education/gut-health"' in html
    assert "Gut Health Basics" in html
    assert "By Dr. Ada" in html
    assert "March 5, 2024" in html
    assert "Hidden" not in html
    assert "<title>Education | Acme Corp</title>" in html

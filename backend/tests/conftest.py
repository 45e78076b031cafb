import pytest
from flask_jwt_extended import create_access_token

from pagehost import create_app
from pagehost.extensions import db
from pagehost.models import ClientSite, ClientPage, ClientComponent


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(app):
    token = create_access_token(identity="editor-1")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_site(app):
    def _make_site(slug="acme", **fields):
        site = ClientSite(
            name=fields.pop("name", slug.title()),
            slug=slug,
            is_active=fields.pop("is_active", True),
            **fields,
        )
        db.session.add(site)
        db.session.commit()
        return site
    return _make_site


@pytest.fixture
def make_page(app):
    def _make_page(site, slug, **fields):
        fields.setdefault("is_published", True)
        page = ClientPage(client_id=site.id, slug=slug, **fields)
        db.session.add(page)
        db.session.commit()
        return page
    return _make_page


@pytest.fixture
def make_component(app):
    def _make_component(site, component_type, **fields):
        component = ClientComponent(
            client_id=site.id,
            component_type=component_type,
            **fields,
        )
        db.session.add(component)
        db.session.commit()
        return component
    return _make_component


@pytest.fixture
def acme(make_site):
    return make_site(
        "acme",
        name="Acme Corp",
        global_css="body { margin: 0; }",
        favicon="/acme.ico",
        meta_defaults={
            "default_title": "Acme Default",
            "default_description": "Acme makes everything.",
            "default_og_image": "https://cdn.example.com/acme.png",
        },
    )


@pytest.fixture
def about_page(acme, make_page):
    """The about page with a pending draft title."""
    return make_page(
        acme,
        "about",
        title="About",
        html_content="<h1>About</h1>",
        css_content="h1 { color: red; }",
        meta_title="About Us",
        meta_description="Who we are",
        has_draft=True,
        meta_title_draft="About Our Company.",
        html_content_draft="<h1>About our company</h1>",
    )

"""
Pytest configuration and fixtures for NexaCMS tests.

Every test gets a fresh app on an in-memory SQLite database with the
application context pushed, so services can be called directly.
"""
import pytest
from flask_jwt_extended import create_access_token

from nexacms import create_app
from nexacms.extensions import db
from nexacms.application.cms.create_page import create_page
from nexacms.application.navigation.menus import create_menu

ADMIN = "ADMIN"
EDITOR = "EDITOR"
VIEWER = "VIEWER"


@pytest.fixture()
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def auth_headers(app):
    """Factory: JSON + bearer headers for a caller holding `role`."""
    def _headers(role):
        token = create_access_token(identity=f"user-{role.lower()}", additional_claims={"role": role})
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture()
def admin_headers(auth_headers):
    return auth_headers(ADMIN)


@pytest.fixture()
def editor_headers(auth_headers):
    return auth_headers(EDITOR)


@pytest.fixture()
def viewer_headers(auth_headers):
    return auth_headers(VIEWER)


@pytest.fixture()
def make_page(app):
    """Factory: create a DRAFT page through the service layer."""
    counter = {"n": 0}

    def _make(title=None, slug=None, **extra):
        counter["n"] += 1
        n = counter["n"]
        data = {"title": title or f"Page {n}", "slug": slug or f"/page-{n}", **extra}
        return create_page(role=ADMIN, data=data)
    return _make


@pytest.fixture()
def menu(app):
    return create_menu(role=ADMIN, name="Main", location="HEADER_PRIMARY")

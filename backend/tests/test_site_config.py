"""Tests for the site configuration row and the theme derived from it."""
import pytest

from nexacms.extensions import db
from nexacms.models.site_config import SITE_CONFIG_ID, SiteConfig
from nexacms.application.site import site_config as site_config_service
from nexacms.domain.errors import BadInput, Forbidden
from nexacms.application.site.site_config import get_site_config, get_theme, update_site_config
from nexacms.sections.theme import Theme

from conftest import ADMIN, EDITOR


def test_first_read_creates_defaults(app):
    config = get_site_config()

    assert SiteConfig.query.count() == 1
    assert config.id == SITE_CONFIG_ID
    assert get_site_config().id == config.id
    assert get_theme() == Theme.default()


def test_update_changes_theme(app):
    update_site_config(role=ADMIN, data={
        "site_name": "Acme",
        "primary_color": "#ff0000",
        "direction": "RTL",
    })

    theme = get_theme()
    assert theme.site_name == "Acme"
    assert theme.primary_color == "#ff0000"
    assert theme.direction == "RTL"
    assert "--cms-primary: #ff0000;" in theme.css_variables()


@pytest.mark.parametrize("data", [
    {"primary_color": "red"},
    {"accent_color": "#12345"},
    {"theme": "SEPIA"},
    {"direction": "TTB"},
    {},
])
def test_invalid_updates_are_bad_input(app, data):
    with pytest.raises(BadInput):
        update_site_config(role=ADMIN, data=data)

    assert get_theme() == Theme.default()


def test_only_admin_updates(app):
    with pytest.raises(Forbidden):
        update_site_config(role=EDITOR, data={"site_name": "Nope"})


def test_explicit_null_clears_logo(app):
    update_site_config(role=ADMIN, data={"logo_url": "/logo.svg"})
    assert get_site_config().logo_url == "/logo.svg"

    update_site_config(role=ADMIN, data={"logo_url": None})
    assert get_site_config().logo_url is None


def test_racing_first_reads_keep_a_single_row(app, monkeypatch):
    get_site_config()
    update_site_config(role=ADMIN, data={"site_name": "Winner"})
    db.session.expunge_all()

    real_load = site_config_service._load_site_config
    calls = {"n": 0}

    def stale_then_real():
        # First lookup misses; another request has already inserted the row
        calls["n"] += 1
        return None if calls["n"] == 1 else real_load()

    monkeypatch.setattr(site_config_service, "_load_site_config", stale_then_real)

    config = get_site_config()

    assert config.id == SITE_CONFIG_ID
    assert config.site_name == "Winner"
    assert SiteConfig.query.count() == 1

"""Tests for the page services: slugs, the homepage rule, lifecycle and roles."""
from datetime import datetime, timedelta, timezone

import pytest

from nexacms.extensions import db
from nexacms.models.page import Page
from nexacms.models.section import PageSection
from nexacms.models.navigation import NavigationItem
from nexacms.domain.errors import BadInput, Conflict, Forbidden, NotFound
from nexacms.application.cms.create_page import create_page
from nexacms.application.cms.update_page import update_page
from nexacms.application.cms.delete_page import delete_page
from nexacms.application.cms.publish_page import publish_page, schedule_page
from nexacms.application.cms.unpublish_page import unpublish_page
from nexacms.application.cms.add_section import add_section
from nexacms.application.cms.queries import get_page, get_published_page, list_pages
from nexacms.application.navigation.add_item import add_item

from conftest import ADMIN, EDITOR, VIEWER


def test_create_page_starts_as_draft(make_page):
    page = make_page(title="About", slug="/about", seo_title="About us")

    assert page.id
    assert page.status == "DRAFT"
    assert page.published_at is None
    assert page.seo_title == "About us"
    assert not page.is_homepage


def test_duplicate_slug_is_rejected_and_nothing_changes(make_page):
    make_page(title="About", slug="/about")

    with pytest.raises(Conflict):
        create_page(role=ADMIN, data={"title": "Another", "slug": "/about"})

    assert Page.query.count() == 1
    assert Page.query.first().title == "About"


def test_only_one_homepage(make_page):
    home = make_page(title="Home", slug="/")
    assert home.is_homepage

    with pytest.raises(Conflict, match="homepage"):
        create_page(role=ADMIN, data={"title": "Home 2", "slug": "/"})


@pytest.mark.parametrize("slug", ["about", "/about/", "/a//b", "/with space"])
def test_malformed_slugs_are_bad_input(app, slug):
    with pytest.raises(BadInput):
        create_page(role=ADMIN, data={"title": "Bad", "slug": slug})

    assert Page.query.count() == 0


def test_missing_title_is_bad_input(app):
    with pytest.raises(BadInput):
        create_page(role=ADMIN, data={"slug": "/no-title"})


def test_editor_creates_viewer_cannot(app):
    create_page(role=EDITOR, data={"title": "By editor", "slug": "/by-editor"})

    with pytest.raises(Forbidden):
        create_page(role=VIEWER, data={"title": "By viewer", "slug": "/by-viewer"})

    assert Page.query.count() == 1


def test_update_changes_only_given_fields(make_page):
    page = make_page(title="About", slug="/about", seo_description="Who we are")

    updated = update_page(role=EDITOR, page_id=page.id, data={"title": "About Us"})

    assert updated.title == "About Us"
    assert updated.slug == "/about"
    assert updated.seo_description == "Who we are"


def test_update_with_nothing_is_bad_input(make_page):
    page = make_page()

    with pytest.raises(BadInput):
        update_page(role=ADMIN, page_id=page.id, data={"status": "PUBLISHED"})


def test_update_to_taken_slug_conflicts(make_page):
    make_page(slug="/taken")
    page = make_page(slug="/mine")

    with pytest.raises(Conflict):
        update_page(role=ADMIN, page_id=page.id, data={"slug": "/taken"})

    db.session.expire_all()
    assert get_page(page.id).slug == "/mine"


def test_update_keeping_own_slug_is_allowed(make_page):
    page = make_page(slug="/mine")

    updated = update_page(role=ADMIN, page_id=page.id, data={"slug": "/mine", "title": "Same"})

    assert updated.slug == "/mine"


def test_unknown_page_is_not_found(app):
    with pytest.raises(NotFound):
        update_page(role=ADMIN, page_id="missing", data={"title": "x"})


def test_publish_and_unpublish(make_page):
    page = make_page()

    published = publish_page(role=ADMIN, page_id=page.id)
    assert published.status == "PUBLISHED"
    assert published.published_at is not None
    assert get_published_page(page.slug).id == page.id

    draft = unpublish_page(role=ADMIN, page_id=page.id)
    assert draft.status == "DRAFT"
    assert draft.published_at is None

    with pytest.raises(NotFound):
        get_published_page(page.slug)


def test_illegal_transitions_are_rejected(make_page):
    page = make_page()

    with pytest.raises(BadInput):
        unpublish_page(role=ADMIN, page_id=page.id)

    publish_page(role=ADMIN, page_id=page.id)
    with pytest.raises(BadInput):
        publish_page(role=ADMIN, page_id=page.id)


def test_publishing_requires_admin(make_page):
    page = make_page()

    with pytest.raises(Forbidden):
        publish_page(role=EDITOR, page_id=page.id)

    assert get_page(page.id).status == "DRAFT"


def test_schedule_then_publish(make_page):
    page = make_page()
    when = datetime.now(timezone.utc) + timedelta(days=2)

    scheduled = schedule_page(role=ADMIN, page_id=page.id, publish_at=when)
    assert scheduled.status == "SCHEDULED"

    with pytest.raises(NotFound):
        get_published_page(page.slug)

    assert publish_page(role=ADMIN, page_id=page.id).status == "PUBLISHED"


@pytest.mark.parametrize("when", [
    datetime.now(timezone.utc) - timedelta(hours=1),
    datetime(2099, 1, 1),
])
def test_schedule_rejects_past_or_naive_times(make_page, when):
    page = make_page()

    with pytest.raises(BadInput):
        schedule_page(role=ADMIN, page_id=page.id, publish_at=when)

    assert get_page(page.id).status == "DRAFT"


def test_list_pages_filters_by_status(make_page):
    first = make_page()
    make_page()
    publish_page(role=ADMIN, page_id=first.id)

    published = list_pages(status="PUBLISHED")
    everything = list_pages()

    assert [p.id for p in published.items] == [first.id]
    assert everything.total == 2

    with pytest.raises(BadInput):
        list_pages(status="ARCHIVED")


def test_delete_page_removes_sections_and_unlinks_navigation(make_page, menu):
    page = make_page(slug="/gone")
    keep = make_page(slug="/kept")
    add_section(role=ADMIN, page_id=page.id, template_id="hero-centered")
    add_section(role=ADMIN, page_id=page.id, template_id="text-block")
    add_section(role=ADMIN, page_id=keep.id, template_id="text-block")
    item = add_item(role=ADMIN, menu_id=menu.id, data={
        "title": "Gone", "page_id": page.id, "url": "/gone",
    })

    with pytest.raises(Forbidden):
        delete_page(role=EDITOR, page_id=page.id)

    delete_page(role=ADMIN, page_id=page.id)

    assert Page.query.filter_by(id=page.id).first() is None
    assert PageSection.query.filter_by(page_id=page.id).count() == 0
    assert PageSection.query.filter_by(page_id=keep.id).count() == 1

    link = NavigationItem.query.filter_by(id=item.id).one()
    assert link.page_id is None
    assert link.url == "/gone"

"""Tests for section composition: add, update, reorder and remove."""
import pytest

from nexacms.extensions import db
from nexacms.models.section import PageSection
from nexacms.domain.errors import BadInput, Forbidden, NotFound
from nexacms.application.cms.add_section import add_section
from nexacms.application.cms.update_section import update_section
from nexacms.application.cms.reorder_sections import reorder_sections
from nexacms.application.cms.remove_section import remove_section
from nexacms.application.cms.queries import get_sections
from nexacms.sections import registry
from nexacms.sections.renderer import render

from conftest import ADMIN, EDITOR, VIEWER


def section_count(page):
    return PageSection.query.filter_by(page_id=page.id).count()


def test_first_section_gets_order_one_then_max_plus_one(make_page):
    page = make_page()

    first = add_section(role=EDITOR, page_id=page.id, template_id="hero-centered")
    second = add_section(role=EDITOR, page_id=page.id, template_id="text-block")

    assert (first.order, second.order) == (1, 2)


def test_next_order_follows_the_highest_not_the_count(make_page):
    page = make_page()
    add_section(role=ADMIN, page_id=page.id, template_id="text-block", order=7)

    section = add_section(role=ADMIN, page_id=page.id, template_id="text-block")

    assert section.order == 8


def test_orders_are_scoped_per_page(make_page):
    one = make_page()
    two = make_page()
    add_section(role=ADMIN, page_id=one.id, template_id="text-block")
    add_section(role=ADMIN, page_id=one.id, template_id="text-block")

    assert add_section(role=ADMIN, page_id=two.id, template_id="text-block").order == 1


def test_omitted_props_take_template_defaults(make_page):
    page = make_page()

    section = add_section(role=ADMIN, page_id=page.id, template_id="hero-minimal")

    assert section.props == registry.get_template("hero-minimal").default_props


def test_given_props_are_stored_as_sent(make_page):
    page = make_page()
    props = {"content": "<p>Hello</p>"}

    section = add_section(role=ADMIN, page_id=page.id, template_id="text-block", props=props)

    assert section.props == {"content": "<p>Hello</p>"}


def test_unknown_template_is_rejected_and_page_unchanged(make_page):
    page = make_page()
    add_section(role=ADMIN, page_id=page.id, template_id="text-block")
    before = section_count(page)

    with pytest.raises(BadInput):
        add_section(role=ADMIN, page_id=page.id, template_id="nonexistent-template")

    assert section_count(page) == before


def test_retired_template_cannot_be_added(make_page):
    page = make_page()

    with pytest.raises(BadInput):
        add_section(role=ADMIN, page_id=page.id, template_id="hero-section")

    assert section_count(page) == 0


def test_invalid_props_are_rejected(make_page):
    page = make_page()

    with pytest.raises(BadInput, match="textAlign"):
        add_section(role=ADMIN, page_id=page.id, template_id="text-block",
                    props={"textAlign": "diagonal"})

    with pytest.raises(BadInput):
        add_section(role=ADMIN, page_id=page.id, template_id="text-block", props=["not", "a", "dict"])

    assert section_count(page) == 0


def test_bad_order_is_rejected(make_page):
    page = make_page()

    with pytest.raises(BadInput):
        add_section(role=ADMIN, page_id=page.id, template_id="text-block", order=0)


def test_missing_page_is_not_found(app):
    with pytest.raises(NotFound):
        add_section(role=ADMIN, page_id="missing", template_id="text-block")


def test_viewer_cannot_write_sections(make_page):
    page = make_page()

    with pytest.raises(Forbidden):
        add_section(role=VIEWER, page_id=page.id, template_id="text-block")


def test_update_is_partial(make_page):
    page = make_page()
    section = add_section(role=ADMIN, page_id=page.id, template_id="text-block",
                          props={"content": "<p>v1</p>"})

    moved = update_section(role=EDITOR, section_id=section.id, order=5)
    assert moved.order == 5
    assert moved.props == {"content": "<p>v1</p>"}

    edited = update_section(role=EDITOR, section_id=section.id, props={"content": "<p>v2</p>"})
    assert edited.order == 5
    assert edited.props == {"content": "<p>v2</p>"}


def test_update_requires_something_to_change(make_page):
    page = make_page()
    section = add_section(role=ADMIN, page_id=page.id, template_id="text-block")

    with pytest.raises(BadInput):
        update_section(role=ADMIN, section_id=section.id)


def test_update_checks_section_belongs_to_page(make_page):
    one = make_page()
    two = make_page()
    section = add_section(role=ADMIN, page_id=one.id, template_id="text-block")

    with pytest.raises(NotFound):
        update_section(role=ADMIN, section_id=section.id, page_id=two.id, order=2)


def test_update_with_invalid_props_leaves_section_alone(make_page):
    page = make_page()
    section = add_section(role=ADMIN, page_id=page.id, template_id="text-block",
                          props={"content": "<p>kept</p>"})

    with pytest.raises(BadInput):
        update_section(role=ADMIN, section_id=section.id, props={"maxWidth": "5000px"})

    db.session.expire_all()
    assert db.session.get(PageSection, section.id).props == {"content": "<p>kept</p>"}


def test_reorder_assigns_sequential_orders(make_page):
    page = make_page()
    a = add_section(role=ADMIN, page_id=page.id, template_id="text-block")
    b = add_section(role=ADMIN, page_id=page.id, template_id="text-block")
    c = add_section(role=ADMIN, page_id=page.id, template_id="text-block")

    reorder_sections(role=ADMIN, page_id=page.id, section_ids=[c.id, a.id, b.id])

    assert [(s.id, s.order) for s in get_sections(page.id)] == [(c.id, 1), (a.id, 2), (b.id, 3)]


def test_reorder_subset_keeps_the_rest_after(make_page):
    page = make_page()
    a = add_section(role=ADMIN, page_id=page.id, template_id="text-block")
    b = add_section(role=ADMIN, page_id=page.id, template_id="text-block")
    c = add_section(role=ADMIN, page_id=page.id, template_id="text-block")

    reorder_sections(role=ADMIN, page_id=page.id, section_ids=[c.id])

    assert [s.id for s in get_sections(page.id)] == [c.id, a.id, b.id]


def test_reorder_rejects_duplicates_and_foreign_ids(make_page):
    page = make_page()
    other = make_page()
    a = add_section(role=ADMIN, page_id=page.id, template_id="text-block")
    b = add_section(role=ADMIN, page_id=page.id, template_id="text-block")
    stranger = add_section(role=ADMIN, page_id=other.id, template_id="text-block")

    with pytest.raises(BadInput):
        reorder_sections(role=ADMIN, page_id=page.id, section_ids=[b.id, b.id])

    with pytest.raises(NotFound):
        reorder_sections(role=ADMIN, page_id=page.id, section_ids=[b.id, stranger.id, a.id])

    db.session.expire_all()
    assert [s.id for s in get_sections(page.id)] == [a.id, b.id]


def test_about_page_reordered_renders_text_before_hero(make_page):
    page = make_page(title="About", slug="/about")
    hero = add_section(role=ADMIN, page_id=page.id, template_id="hero-centered")
    text = add_section(role=ADMIN, page_id=page.id, template_id="text-block")

    reorder_sections(role=ADMIN, page_id=page.id, section_ids=[text.id, hero.id])

    html = str(render(get_sections(page.id)).html)
    assert html.index('data-template="text-block"') < html.index('data-template="hero-centered"')


def test_remove_section_leaves_others(make_page):
    page = make_page()
    a = add_section(role=ADMIN, page_id=page.id, template_id="text-block")
    b = add_section(role=ADMIN, page_id=page.id, template_id="text-block")
    c = add_section(role=ADMIN, page_id=page.id, template_id="text-block")

    remove_section(role=EDITOR, section_id=b.id)

    assert [(s.id, s.order) for s in get_sections(page.id)] == [(a.id, 1), (c.id, 3)]

    with pytest.raises(NotFound):
        remove_section(role=EDITOR, section_id=b.id)


@pytest.mark.parametrize("props", [
    {"background": {"type": "color", "color": "red; position:fixed"}},
    {"background": {"type": "gradient", "gradient": {"direction": "45deg; z-index:9"}}},
    {"background": {"type": "image", "image": {"url": "a.jpg'); b:c"}}},
])
def test_style_bound_props_are_rejected_on_write(make_page, props):
    page = make_page()

    with pytest.raises(BadInput):
        add_section(role=ADMIN, page_id=page.id, template_id="hero-centered", props=props)

    assert section_count(page) == 0

"""Tests for public page search: scoring, visibility and excerpts."""
from nexacms.application.cms.add_section import add_section
from nexacms.application.cms.publish_page import publish_page
from nexacms.application.site.search import excerpt, search_pages

from conftest import ADMIN


def published(make_page, **fields):
    page = make_page(**fields)
    publish_page(role=ADMIN, page_id=page.id)
    return page


def test_short_queries_return_nothing(make_page):
    published(make_page, title="A")

    assert search_pages("a") == []
    assert search_pages("   ") == []


def test_drafts_are_never_found(make_page):
    make_page(title="Secret pricing")

    assert search_pages("pricing") == []


def test_title_outranks_seo_fields(make_page):
    by_description = published(make_page, title="Company", seo_description="Our pricing explained")
    by_title = published(make_page, title="Pricing")

    results = search_pages("pricing")

    assert [r.page.id for r in results] == [by_title.id, by_description.id]
    assert results[0].score == 10
    assert results[1].score == 3


def test_section_text_adds_one_per_section(make_page):
    page = make_page(title="Team")
    add_section(role=ADMIN, page_id=page.id, template_id="text-block",
                props={"content": "<p>Meet our engineers</p>"})
    add_section(role=ADMIN, page_id=page.id, template_id="hero-centered",
                props={"title": {"text": "Engineers wanted", "tag": "h1"}})
    add_section(role=ADMIN, page_id=page.id, template_id="text-block",
                props={"content": "<p>Nothing relevant</p>"})
    publish_page(role=ADMIN, page_id=page.id)

    (result,) = search_pages("engineers")

    assert result.score == 2


def test_search_is_case_insensitive(make_page):
    page = published(make_page, title="Contact Us")

    assert [r.page.id for r in search_pages("CONTACT")] == [page.id]


def test_excerpt_highlights_match_and_escapes():
    text = "x" * 80 + " <b>widgets</b> " + "y" * 80

    snippet = str(excerpt(text, "widgets"))

    assert "<strong>widgets</strong>" in snippet
    assert "&lt;b&gt;" in snippet
    assert snippet.startswith("...")
    assert snippet.endswith("...")


def test_excerpt_without_match_is_empty():
    assert str(excerpt("nothing here", "absent")) == ""

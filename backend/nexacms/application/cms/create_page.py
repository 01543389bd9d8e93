from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from nexacms.extensions import db
from nexacms.models.page import Page, HOMEPAGE_SLUG
from nexacms.domain.access import require
from nexacms.domain.errors import Conflict
from nexacms.domain.invariants.page import assert_page
from nexacms.application.validation import parse_input
from nexacms.utils.transaction import transactional
from .queries import get_page_by_slug
from .schemas import PageCreate


def assert_slug_available(slug: str, *, exclude_page_id: str | None = None) -> None:
    existing = get_page_by_slug(slug)
    if existing and existing.id != exclude_page_id:
        if slug == HOMEPAGE_SLUG:
            raise Conflict("A homepage already exists")
        raise Conflict("A page with this slug already exists")


def create_page(
    *,
    role: str,
    data: Dict[str, Any],
) -> Page:
    """
    Create a new CMS page in DRAFT state.

    Edge cases handled:
    - Missing required fields
    - Duplicate slug (including a second homepage)
    - Invariant violations
    """
    require(role, "page.create")
    payload = parse_input(PageCreate, data)

    page = Page()
    page.title = payload.title
    page.slug = payload.slug
    page.status = "DRAFT"
    page.seo_title = payload.seo_title
    page.seo_description = payload.seo_description
    page.seo_keywords = payload.seo_keywords

    # Domain invariants (single source of truth)
    assert_page(page)
    assert_slug_available(page.slug)

    try:
        with transactional():
            db.session.add(page)
            db.session.flush()  # ensures page.id is available

            current_app.logger.info("page.create id=%s slug=%s", page.id, page.slug)

        return page

    except IntegrityError as exc:
        # Unique slug constraint lost a race with a concurrent create
        raise Conflict("A page with this slug already exists") from exc

from flask import current_app
from nexacms.models.page import Page
from nexacms.domain.access import require
from nexacms.domain.invariants.page import assert_page
from nexacms.domain.lifecycle.page import assert_page_transition
from nexacms.utils.transaction import transactional
from .queries import get_page


def unpublish_page(
    *,
    role: str,
    page_id: str,
) -> Page:
    """
    Returns a PUBLISHED or SCHEDULED page to DRAFT.
    The page disappears from the public read path immediately.
    """
    require(role, "page.unpublish")
    page = get_page(page_id)

    with transactional():
        assert_page_transition(from_status=page.status, to_status="DRAFT")

        page.status = "DRAFT"
        page.published_at = None

        assert_page(page)

        current_app.logger.info("page.unpublish id=%s slug=%s", page.id, page.slug)

    return page

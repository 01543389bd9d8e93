from datetime import datetime
from flask import current_app
from nexacms.models.base import utc_now
from nexacms.models.page import Page
from nexacms.domain.access import require
from nexacms.domain.errors import BadInput
from nexacms.domain.invariants.page import assert_page
from nexacms.domain.lifecycle.page import assert_page_transition
from nexacms.utils.transaction import transactional
from .queries import get_page


def publish_page(
    *,
    role: str,
    page_id: str,
) -> Page:
    """
    Publishes a page and stamps its publish time.

    Responsibilities:
    - transactional boundary
    - lifecycle enforcement
    - invariant enforcement
    """
    require(role, "page.publish")
    page = get_page(page_id)

    with transactional():
        # Lifecycle transition enforcement
        assert_page_transition(from_status=page.status, to_status="PUBLISHED")

        page.status = "PUBLISHED"
        page.published_at = utc_now()

        assert_page(page)

        current_app.logger.info("page.publish id=%s slug=%s", page.id, page.slug)

    return page


def schedule_page(
    *,
    role: str,
    page_id: str,
    publish_at: datetime,
) -> Page:
    """
    Marks a DRAFT page SCHEDULED for `publish_at`.
    Promotion to PUBLISHED is a separate publish_page call.
    """
    require(role, "page.publish")
    page = get_page(page_id)

    if publish_at.tzinfo is None:
        raise BadInput("publish_at must carry a timezone")

    if publish_at <= utc_now():
        raise BadInput("publish_at must be in the future")

    with transactional():
        assert_page_transition(from_status=page.status, to_status="SCHEDULED")

        page.status = "SCHEDULED"
        page.published_at = publish_at

        assert_page(page)

        current_app.logger.info(
            "page.schedule id=%s publish_at=%s", page.id, publish_at.isoformat()
        )

    return page

from flask import current_app
from nexacms.extensions import db
from nexacms.models.navigation import NavigationItem
from nexacms.domain.access import require
from nexacms.utils.transaction import transactional
from .queries import get_page


def delete_page(
    *,
    role: str,
    page_id: str,
) -> None:
    """
    Hard-delete a page and its sections.

    Notes:
    - Sections go through the relationship cascade
    - Navigation items keep their url and lose the page reference
    """
    require(role, "page.delete")
    page = get_page(page_id)

    with transactional():
        unlinked = (
            NavigationItem.query
            .filter_by(page_id=page.id)
            .update({"page_id": None}, synchronize_session="fetch")
        )

        db.session.delete(page)

        current_app.logger.info(
            "page.delete id=%s slug=%s unlinked_nav_items=%s", page_id, page.slug, unlinked
        )

from typing import Any, Dict, Optional
from flask import current_app
from nexacms.extensions import db
from nexacms.models.navigation import NavigationItem
from nexacms.models.page import Page
from nexacms.domain.access import require
from nexacms.domain.errors import BadInput, NotFound
from nexacms.application.validation import parse_input
from nexacms.utils.order import next_order
from nexacms.utils.transaction import transactional
from .queries import get_item, get_menu
from .schemas import ItemCreate


def assert_link(url: Optional[str], page_id: Optional[str]) -> None:
    if not url and not page_id:
        raise BadInput("A navigation item needs a url or a pageId")


def assert_page_exists(page_id: Optional[str]) -> None:
    if page_id and not Page.query.filter_by(id=page_id).first():
        raise BadInput(f"Referenced page does not exist: {page_id}")


def assert_parent_in_menu(parent_id: Optional[str], menu_id: str) -> None:
    if parent_id is None:
        return
    try:
        get_item(parent_id, menu_id)
    except NotFound as exc:
        raise NotFound("Parent item not found in this menu") from exc


def next_sibling_order(menu_id: str, parent_id: Optional[str]) -> int:
    if parent_id is None:
        parent_clause = NavigationItem.parent_id.is_(None)
    else:
        parent_clause = NavigationItem.parent_id == parent_id
    return next_order(NavigationItem.order, NavigationItem.menu_id == menu_id, parent_clause)


def add_item(
    *,
    role: str,
    menu_id: str,
    data: Dict[str, Any],
) -> NavigationItem:
    """
    Adds an item to a menu.

    - title required; url or page_id required
    - parent, when given, must be in the same menu
    - order defaults to max(sibling order) + 1
    """
    require(role, "navigation.write")
    payload = parse_input(ItemCreate, data)

    menu = get_menu(menu_id)
    assert_link(payload.url, payload.page_id)
    assert_page_exists(payload.page_id)
    assert_parent_in_menu(payload.parent_id, menu.id)

    with transactional():
        item = NavigationItem()
        item.menu_id = menu.id
        item.parent_id = payload.parent_id
        item.title = payload.title
        item.url = payload.url
        item.page_id = payload.page_id
        item.target = payload.target
        item.is_visible = payload.is_visible
        item.css_class = payload.css_class
        item.icon = payload.icon
        item.order = (
            payload.order if payload.order is not None
            else next_sibling_order(menu.id, payload.parent_id)
        )

        db.session.add(item)
        db.session.flush()

        current_app.logger.info(
            "nav_item.add id=%s menu=%s parent=%s order=%s",
            item.id, menu.id, item.parent_id, item.order,
        )

    return item

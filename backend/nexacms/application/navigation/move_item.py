from typing import Optional
from flask import current_app
from nexacms.models.navigation import NavigationItem
from nexacms.domain.access import require
from nexacms.domain.invariants.navigation import assert_can_reparent
from nexacms.utils.transaction import transactional
from .add_item import assert_parent_in_menu, next_sibling_order
from .queries import get_item, parent_rows


def reparent(item: NavigationItem, new_parent_id: Optional[str]) -> None:
    """
    Validate and apply a parent change. Call inside a transaction.

    The menu is read once as a flat table and the cycle check walks it in
    memory. Rows are not locked: a concurrent reparent between the check and
    the write can still produce a cycle.
    """
    assert_parent_in_menu(new_parent_id, item.menu_id)
    assert_can_reparent(item.id, new_parent_id, parent_rows(item.menu_id))

    # Sibling order is read while the item still sits under its old parent
    order = next_sibling_order(item.menu_id, new_parent_id)

    item.parent_id = new_parent_id
    item.order = order


def move_item(
    *,
    role: str,
    item_id: str,
    new_parent_id: Optional[str],
) -> NavigationItem:
    """Moves an item (and its subtree) under `new_parent_id`, or to the top level."""
    require(role, "navigation.write")
    item = get_item(item_id)

    if item.parent_id == new_parent_id:
        return item

    with transactional():
        reparent(item, new_parent_id)

        current_app.logger.info(
            "nav_item.move id=%s parent=%s order=%s", item.id, new_parent_id, item.order
        )

    return item

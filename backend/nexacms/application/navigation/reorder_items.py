from typing import Any, Dict, List, Optional
from flask import current_app
from nexacms.models.navigation import NavigationItem
from nexacms.domain.access import require
from nexacms.domain.errors import BadInput, NotFound
from nexacms.domain.invariants.navigation import assert_acyclic
from nexacms.application.validation import parse_input
from nexacms.utils.transaction import transactional
from .queries import get_menu
from .schemas import ItemsReorder


def reorder_items(
    *,
    role: str,
    menu_id: str,
    entries: List[Dict[str, Any]],
) -> List[NavigationItem]:
    """
    Bulk reposition: each entry sets one item's `order` and `parent_id`.

    Checked before anything is written:
    - every id belongs to the menu
    - every parent belongs to the menu
    - the resulting parent map has no cycles
    """
    require(role, "navigation.write")
    payload = parse_input(ItemsReorder, {"items": entries})

    ids = [entry.id for entry in payload.items]
    if len(set(ids)) != len(ids):
        raise BadInput("Duplicate item ids in reorder request")

    menu = get_menu(menu_id)
    items = NavigationItem.query.filter_by(menu_id=menu.id).all()
    by_id = {item.id: item for item in items}

    foreign = [item_id for item_id in ids if item_id not in by_id]
    if foreign:
        raise NotFound(f"Items not in this menu: {', '.join(foreign)}")

    parent_map: Dict[str, Optional[str]] = {item.id: item.parent_id for item in items}
    for entry in payload.items:
        if entry.parent_id is not None and entry.parent_id not in by_id:
            raise NotFound(f"Parent item not in this menu: {entry.parent_id}")
        if entry.parent_id == entry.id:
            raise BadInput(f"Item {entry.id} cannot be its own parent")
        parent_map[entry.id] = entry.parent_id

    assert_acyclic(parent_map)

    with transactional():
        for entry in payload.items:
            item = by_id[entry.id]
            item.order = entry.order
            item.parent_id = entry.parent_id

        current_app.logger.info("nav_item.reorder menu=%s count=%s", menu.id, len(ids))

    return [by_id[item_id] for item_id in ids]

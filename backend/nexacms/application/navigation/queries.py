from typing import List, Optional, Tuple

from nexacms.extensions import db
from nexacms.domain.errors import BadInput, NotFound
from nexacms.models.navigation import MENU_LOCATIONS, NavigationItem, NavigationMenu


def get_menu(menu_id: str) -> NavigationMenu:
    menu = NavigationMenu.query.filter_by(id=menu_id).first()
    if not menu:
        raise NotFound("Menu not found")
    return menu


def get_item(item_id: str, menu_id: Optional[str] = None) -> NavigationItem:
    item = NavigationItem.query.filter_by(id=item_id).first()
    if not item or (menu_id is not None and item.menu_id != menu_id):
        raise NotFound("Navigation item not found")
    return item


def list_menus(*, location: Optional[str] = None) -> List[NavigationMenu]:
    if location and location not in MENU_LOCATIONS:
        raise BadInput(f"Unknown menu location: {location}")

    query = NavigationMenu.query
    if location:
        query = query.filter_by(location=location)

    return query.order_by(NavigationMenu.location.asc(), NavigationMenu.name.asc()).all()


def get_active_menu(location: str) -> Optional[NavigationMenu]:
    """Oldest active menu at `location`, or None."""
    return (
        NavigationMenu.query
        .filter_by(location=location, is_active=True)
        .order_by(NavigationMenu.created_at.asc())
        .first()
    )


def parent_rows(menu_id: str) -> List[Tuple[str, Optional[str]]]:
    """The whole menu as a flat (id, parent_id) table, in one query."""
    rows = (
        db.session.query(NavigationItem.id, NavigationItem.parent_id)
        .filter(NavigationItem.menu_id == menu_id)
        .all()
    )
    return [(row.id, row.parent_id) for row in rows]

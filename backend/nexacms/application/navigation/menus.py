from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from nexacms.extensions import db
from nexacms.models.navigation import NavigationMenu
from nexacms.domain.access import require
from nexacms.domain.errors import BadInput, Conflict
from nexacms.application.validation import parse_input
from nexacms.utils.transaction import transactional
from .queries import get_menu
from .schemas import MenuCreate, MenuUpdate


def _assert_unique(name: str, location: str, exclude_menu_id: str | None = None) -> None:
    existing = NavigationMenu.query.filter_by(name=name, location=location).first()
    if existing and existing.id != exclude_menu_id:
        raise Conflict(f"A menu named {name!r} already exists at {location}")


def create_menu(
    *,
    role: str,
    name: str,
    location: str,
    is_active: bool = True,
) -> NavigationMenu:
    require(role, "navigation.write")
    payload = parse_input(MenuCreate, {"name": name, "location": location, "is_active": is_active})

    _assert_unique(payload.name, payload.location)

    menu = NavigationMenu()
    menu.name = payload.name
    menu.location = payload.location
    menu.is_active = payload.is_active

    try:
        with transactional():
            db.session.add(menu)
            db.session.flush()

            current_app.logger.info(
                "menu.create id=%s name=%s location=%s", menu.id, menu.name, menu.location
            )
    except IntegrityError as exc:
        raise Conflict(f"A menu named {name!r} already exists at {location}") from exc

    return menu


def update_menu(
    *,
    role: str,
    menu_id: str,
    data: Dict[str, Any],
) -> NavigationMenu:
    """Rename, relocate or (de)activate; (name, location) stays unique."""
    require(role, "navigation.write")
    fields = parse_input(MenuUpdate, data).model_dump(exclude_unset=True)
    fields = {k: v for k, v in fields.items() if v is not None}

    if not fields:
        raise BadInput("No valid fields provided for update")

    menu = get_menu(menu_id)
    name = fields.get("name", menu.name)
    location = fields.get("location", menu.location)

    if (name, location) != (menu.name, menu.location):
        _assert_unique(name, location, exclude_menu_id=menu.id)

    try:
        with transactional():
            for field, value in fields.items():
                setattr(menu, field, value)

            current_app.logger.info("menu.update id=%s fields=%s", menu.id, ",".join(fields))
    except IntegrityError as exc:
        raise Conflict(f"A menu named {name!r} already exists at {location}") from exc

    return menu


def delete_menu(
    *,
    role: str,
    menu_id: str,
) -> int:
    """Deletes the menu and every item in it. Returns the number of items removed."""
    require(role, "navigation.write")
    menu = get_menu(menu_id)

    with transactional():
        item_count = len(menu.items)
        db.session.delete(menu)

        current_app.logger.info("menu.delete id=%s items=%s", menu_id, item_count)

    return item_count

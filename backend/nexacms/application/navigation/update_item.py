from typing import Any, Dict
from flask import current_app
from nexacms.models.navigation import NavigationItem
from nexacms.domain.access import require
from nexacms.domain.errors import BadInput
from nexacms.application.validation import parse_input
from nexacms.utils.transaction import transactional
from .add_item import assert_link, assert_page_exists
from .move_item import reparent
from .queries import get_item
from .schemas import ItemUpdate

# Fields that may be cleared with an explicit null
NULLABLE_FIELDS = {"url", "page_id", "parent_id", "css_class", "icon"}


def update_item(
    *,
    role: str,
    menu_id: str,
    item_id: str,
    data: Dict[str, Any],
) -> NavigationItem:
    """
    Partial update. A parent change goes through the same checks as move_item.
    """
    require(role, "navigation.write")
    fields = parse_input(ItemUpdate, data).model_dump(exclude_unset=True)
    fields = {
        k: v for k, v in fields.items()
        if v is not None or k in NULLABLE_FIELDS
    }

    if not fields:
        raise BadInput("No valid fields provided for update")

    item = get_item(item_id, menu_id)

    url = fields.get("url", item.url)
    page_id = fields.get("page_id", item.page_id)
    assert_link(url, page_id)
    if "page_id" in fields:
        assert_page_exists(page_id)

    new_parent_id = fields.pop("parent_id", item.parent_id)

    with transactional():
        if new_parent_id != item.parent_id:
            reparent(item, new_parent_id)

        for field, value in fields.items():
            setattr(item, field, value)

        current_app.logger.info(
            "nav_item.update id=%s fields=%s", item.id, ",".join(sorted(fields)) or "parent_id"
        )

    return item

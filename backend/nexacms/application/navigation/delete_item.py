from flask import current_app
from nexacms.models.navigation import NavigationItem
from nexacms.domain.access import require
from nexacms.domain.invariants.navigation import descendant_ids
from nexacms.utils.transaction import transactional
from .queries import get_item, parent_rows


def delete_item(
    *,
    role: str,
    item_id: str,
) -> int:
    """
    Deletes an item and its whole subtree.
    Returns how many descendants went with it.
    """
    require(role, "navigation.write")
    item = get_item(item_id)

    with transactional():
        descendants = descendant_ids(item.id, parent_rows(item.menu_id))

        NavigationItem.query.filter(
            NavigationItem.id.in_(descendants | {item.id})
        ).delete(synchronize_session="fetch")

        current_app.logger.info(
            "nav_item.delete id=%s descendants=%s", item_id, len(descendants)
        )

    return len(descendants)

def normalize_menu(menu, include_items=False):
    data = {
        "id": menu.id,
        "name": menu.name,
        "location": menu.location,
        "is_active": menu.is_active,
    }

    if include_items:
        data["item_count"] = len(menu.items)

    return data


def normalize_item(item):
    return {
        "id": item.id,
        "menu_id": item.menu_id,
        "parent_id": item.parent_id,
        "title": item.title,
        "url": item.url,
        "page_id": item.page_id,
        "target": item.target,
        "order": item.order,
        "is_visible": item.is_visible,
        "css_class": item.css_class,
        "icon": item.icon,
    }


def normalize_tree_node(node):
    """`node` is a resolved tree entry; children are normalized recursively."""
    data = normalize_item(node.item)
    data["href"] = node.href
    data["page"] = node.page
    data["children"] = [normalize_tree_node(child) for child in node.children]
    return data

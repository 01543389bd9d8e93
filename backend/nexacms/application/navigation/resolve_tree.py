from dataclasses import dataclass, field
from typing import Dict, List, Optional

from nexacms.models.navigation import NavigationItem
from .queries import get_menu


@dataclass
class TreeNode:
    item: NavigationItem
    children: List["TreeNode"] = field(default_factory=list)

    @property
    def page(self) -> Optional[Dict[str, str]]:
        # Read at resolve time so renamed pages show their current title/slug
        page = self.item.page
        if page is None:
            return None
        return {"id": page.id, "title": page.title, "slug": page.slug, "status": page.status}

    @property
    def href(self) -> str:
        if self.item.page is not None:
            return self.item.page.slug
        return self.item.url or "#"


def build_tree(items: List[NavigationItem], visible_only: bool = False) -> List[TreeNode]:
    """
    Assemble top-level nodes with nested children, ordered by `order` at
    every level. Items whose parent is missing or hidden are left out, and
    so is anything sitting on a parent cycle.
    """
    children: Dict[Optional[str], List[NavigationItem]] = {}
    for item in items:
        if visible_only and not item.is_visible:
            continue
        children.setdefault(item.parent_id, []).append(item)

    def attach(parent_id: Optional[str], seen: frozenset) -> List[TreeNode]:
        nodes = []
        for item in sorted(children.get(parent_id, []), key=lambda i: (i.order, i.title)):
            if item.id in seen:
                continue
            nodes.append(TreeNode(item=item, children=attach(item.id, seen | {item.id})))
        return nodes

    return attach(None, frozenset())


def resolve_tree(menu_id: str, visible_only: bool = False) -> List[TreeNode]:
    menu = get_menu(menu_id)
    items = NavigationItem.query.filter_by(menu_id=menu.id).all()
    return build_tree(items, visible_only=visible_only)

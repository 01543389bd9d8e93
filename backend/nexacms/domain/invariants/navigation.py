from typing import Dict, Iterable, Optional, Set, Tuple

from nexacms.domain.errors import CircularReference

# (id, parent_id) rows for one menu
ParentRows = Iterable[Tuple[str, Optional[str]]]


def children_index(rows: ParentRows) -> Dict[Optional[str], list]:
    index: Dict[Optional[str], list] = {}
    for item_id, parent_id in rows:
        index.setdefault(parent_id, []).append(item_id)
    return index


def descendant_ids(item_id: str, rows: ParentRows) -> Set[str]:
    """
    Every id below `item_id`, found depth-first.

    The visited set keeps the walk finite even if stored data already
    contains a cycle.
    """
    index = children_index(rows)
    visited: Set[str] = set()
    stack = list(index.get(item_id, []))

    while stack:
        current = stack.pop()
        if current in visited or current == item_id:
            continue
        visited.add(current)
        stack.extend(index.get(current, []))

    return visited


def assert_can_reparent(item_id: str, new_parent_id: Optional[str], rows: ParentRows) -> None:
    if new_parent_id is None:
        return

    if new_parent_id == item_id:
        raise CircularReference("An item cannot be its own parent.")

    if new_parent_id in descendant_ids(item_id, rows):
        raise CircularReference("Cannot move an item under one of its descendants.")


def assert_acyclic(parent_map: Dict[str, Optional[str]]) -> None:
    """
    Walk each item's ancestor chain; revisiting an id means a cycle.
    """
    settled: Set[str] = set()

    for start in parent_map:
        path: Set[str] = set()
        current: Optional[str] = start

        while current is not None and current not in settled:
            if current in path:
                raise CircularReference(
                    f"Reorder would create a cycle through item {current}."
                )
            path.add(current)
            current = parent_map.get(current)

        settled.update(path)

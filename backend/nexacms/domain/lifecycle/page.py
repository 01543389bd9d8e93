from typing import Dict, Set

from nexacms.domain.errors import BadInput

# Explicit allowed state transitions
ALLOWED_PAGE_TRANSITIONS: Dict[str, Set[str]] = {
    "DRAFT": {"PUBLISHED", "SCHEDULED"},
    "PUBLISHED": {"DRAFT"},
    "SCHEDULED": {"PUBLISHED", "DRAFT"},
}


def assert_page_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards page lifecycle transitions.
    Single source of truth for status changes.
    """
    allowed = ALLOWED_PAGE_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise BadInput(
            f"Illegal page transition: {from_status} -> {to_status}"
        )

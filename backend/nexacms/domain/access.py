from typing import Dict, FrozenSet

from .errors import Forbidden

ROLES = ("ADMIN", "EDITOR", "VIEWER")

# Capability table; VIEWER is read-only and so appears nowhere
CAPABILITIES: Dict[str, FrozenSet[str]] = {
    "page.create": frozenset({"ADMIN", "EDITOR"}),
    "page.update": frozenset({"ADMIN", "EDITOR"}),
    "page.delete": frozenset({"ADMIN"}),
    "page.publish": frozenset({"ADMIN"}),
    "page.unpublish": frozenset({"ADMIN"}),
    "section.write": frozenset({"ADMIN", "EDITOR"}),
    "navigation.write": frozenset({"ADMIN"}),
    "site_config.update": frozenset({"ADMIN"}),
}


def can(role: str, action: str) -> bool:
    return role in CAPABILITIES.get(action, frozenset())


def require(role: str, action: str) -> None:
    """
    Guards every mutating operation.
    Unknown actions are denied.
    """
    if not can(role, action):
        raise Forbidden(f"Role {role or 'anonymous'} may not perform {action}")

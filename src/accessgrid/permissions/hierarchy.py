"""Permission matrix derived from the known areas and actions.

Provides:
- ``get_permission_hierarchy()``: area → ordered list of actions.
- ``all_permissions()``: every grantable ``area:action`` string.
- ``toggle_permission()``: flip one cell of a role editor's selection.

Everything is recomputed on each call from :class:`PermissionArea` and
:class:`PermissionAction`; results are fresh objects the caller may keep
or mutate.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .codec import format_permission
from .constants import PermissionAction, PermissionArea
from .normalize import normalize_permissions


def get_permission_hierarchy() -> dict[str, list[str]]:
    """Map every known area to the full ordered list of known actions.

    Example::

        get_permission_hierarchy()["hours"]
        # ["read", "write", "delete", "approve"]
    """
    return {area.value: [action.value for action in PermissionAction] for area in PermissionArea}


def all_permissions() -> list[str]:
    """Every canonical permission in the matrix, area-major order."""
    return [
        format_permission(area, action)
        for area, actions in get_permission_hierarchy().items()
        for action in actions
    ]


def toggle_permission(selected: Optional[Iterable[Any]], area: str, action: str) -> list[str]:
    """Return a new selection with ``area:action`` flipped.

    The selection is normalized first, so verbose entries loaded from the
    backend compare equal to their canonical counterparts. The input is
    never mutated. An empty ``area`` or ``action`` leaves the selection as is.

    Example::

        toggle_permission(["users:read"], "users", "write")  # ["users:read", "users:write"]
        toggle_permission(["users:read"], "Users", "READ")   # []
    """
    current = normalize_permissions(selected)
    if not area or not action:
        return current

    target = format_permission(area, action)
    if target in current:
        return [perm for perm in current if perm != target]
    return [*current, target]


__all__ = [
    "all_permissions",
    "get_permission_hierarchy",
    "toggle_permission",
]

"""Access-check helpers over held permission lists.

Provides runtime functions that decide whether a principal's permission
list authorizes an ``(area, action)`` pair. Used by route guards and
template directives, which only consume the boolean result.

Producers disagree on area plurality (``employee:read`` vs
``employees:read``), so :func:`has_permission` also accepts the variant
obtained by stripping or appending a single trailing ``s``. The rule is a
one-character heuristic and does not handle irregular plurals.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .codec import SEPARATOR, format_permission, parse_permission
from .constants import PermissionAction, PermissionArea, PrincipalTier
from .normalize import normalize_permissions

logger = logging.getLogger(__name__)

HeldPermissions = Optional[Iterable[Any]]


def _plural_variant(area: str) -> str:
    """Strip a trailing ``s`` if present, otherwise append one."""
    return area[:-1] if area.endswith("s") else f"{area}s"


def _matches(perm_set: set[str], area: str, action: str) -> bool:
    if not perm_set or not area or not action:
        return False

    required = format_permission(area, action)
    if required in perm_set:
        return True

    variant = format_permission(_plural_variant(area.lower()), action)
    if variant in perm_set:
        logger.debug("Permission %s satisfied by plural variant %s", required, variant)
        return True

    return False


def has_permission(held: HeldPermissions, area: str, action: str) -> bool:
    """Check if a permission list grants ``action`` on ``area``.

    Checks in order:
    1. exact ``area:action`` after normalizing the held list
    2. if ``area`` ends with ``s``: the singular ``area[:-1]:action``
    3. otherwise: the plural ``{area}s:action``

    The action is never varied. An empty or absent list grants nothing,
    and so does an empty ``area`` or ``action``.

    Args:
        held: Raw permission strings in either syntax.
        area: Requested area (case-insensitive).
        action: Requested action (case-insensitive).

    Returns:
        True if access is granted.

    Example::

        has_permission(["employees:read"], "employee", "read")  # True
        has_permission(["employee:write"], "employees", "write")  # True
        has_permission(["users:read"], "users", "write")          # False
    """
    if not held:
        return False
    return _matches(set(normalize_permissions(held)), area, action)


def has_any_permission(held: HeldPermissions, required: Iterable[Any]) -> bool:
    """True if at least one of ``required`` is granted by ``held``.

    Each required entry may use either syntax and gets the same plural
    tolerance as :func:`has_permission`. Unparsable entries never match.
    """
    if not held:
        return False
    perm_set = set(normalize_permissions(held))
    return any(_matches(perm_set, *parse_permission(value)) for value in required)


def has_all_permissions(held: HeldPermissions, required: Iterable[Any]) -> bool:
    """True if every entry of ``required`` is granted by ``held``.

    An empty or absent ``held`` list is always False. An empty ``required``
    list with a non-empty ``held`` list is True.
    """
    if not held:
        return False
    perm_set = set(normalize_permissions(held))
    return all(_matches(perm_set, *parse_permission(value)) for value in required)


def areas_with_any_permission(held: HeldPermissions) -> list[str]:
    """Distinct areas appearing in ``held``, in first-seen order.

    Example::

        areas_with_any_permission(["stores:read", "stores:write", "users:read"])
        # ["stores", "users"]
    """
    if not held:
        return []
    areas: dict[str, None] = {}
    for value in held:
        permission = parse_permission(value)
        if permission.is_valid:
            areas.setdefault(permission.area, None)
    return list(areas)


def has_any_for_area(held: HeldPermissions, area: str) -> bool:
    """True if any held permission names ``area``, whatever the action.

    The comparison is case-insensitive but, unlike :func:`has_permission`,
    applies no singular/plural fallback.
    """
    target = area.lower()
    if not held or not target:
        return False
    return any(permission.area == target for permission in map(parse_permission, held) if permission.is_valid)


def permissions_for_area(held: HeldPermissions, area: str) -> list[str]:
    """Normalized permissions of ``held`` scoped to ``area`` (no plural fallback).

    Example::

        permissions_for_area(["hours:read", "PermissionArea.HOURS:PermissionAction.APPROVE", "users:read"], "Hours")
        # ["hours:read", "hours:approve"]
    """
    target = area.lower()
    if not target:
        return []
    return [perm for perm in normalize_permissions(held) if perm.partition(SEPARATOR)[0] == target]


def principal_tier(held: HeldPermissions) -> str:
    """Coarse tier label for a permission list.

    Checks in order:
    1. ``users:delete`` and ``roles:write`` → ``PrincipalTier.ADMIN``
    2. ``employees:approve`` and ``hours:approve`` → ``PrincipalTier.MANAGER``
    3. ``hours:read`` → ``PrincipalTier.EMPLOYEE``
    4. otherwise → ``PrincipalTier.UNKNOWN``
    """
    if not held:
        return PrincipalTier.UNKNOWN
    perm_set = set(normalize_permissions(held))

    def granted(area: PermissionArea, action: PermissionAction) -> bool:
        return _matches(perm_set, area.value, action.value)

    if granted(PermissionArea.USERS, PermissionAction.DELETE) and granted(
        PermissionArea.ROLES, PermissionAction.WRITE
    ):
        return PrincipalTier.ADMIN
    if granted(PermissionArea.EMPLOYEES, PermissionAction.APPROVE) and granted(
        PermissionArea.HOURS, PermissionAction.APPROVE
    ):
        return PrincipalTier.MANAGER
    if granted(PermissionArea.HOURS, PermissionAction.READ):
        return PrincipalTier.EMPLOYEE
    return PrincipalTier.UNKNOWN


__all__ = [
    "areas_with_any_permission",
    "has_all_permissions",
    "has_any_for_area",
    "has_any_permission",
    "has_permission",
    "permissions_for_area",
    "principal_tier",
]

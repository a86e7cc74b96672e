"""Canonicalization of raw permission lists.

Accepts any mix of canonical and verbose strings and produces the
deduplicated canonical form used for comparisons.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .codec import parse_permission

logger = logging.getLogger(__name__)


def normalize_permission(value: Any) -> str:
    """Canonical form of a single permission string.

    Unparsable input yields the degenerate ``":"``.
    """
    return parse_permission(value).canonical


def normalize_permissions(values: Optional[Iterable[Any]]) -> list[str]:
    """Canonicalize and deduplicate a permission list.

    Unparsable entries are discarded. Order is that of first occurrence;
    duplicates are dropped silently.

    Args:
        values: Raw permission strings in either syntax. ``None`` is treated
                as an empty list.

    Returns:
        Deduplicated list of lower-case ``area:action`` strings.

    Example::

        normalize_permissions([
            "PermissionArea.USERS:PermissionAction.READ",
            "users:read",
            "Stores:Write",
            "garbage",
        ])
        # ["users:read", "stores:write"]
    """
    if not values:
        return []

    # dict preserves insertion order
    normalized: dict[str, None] = {}
    dropped = 0
    total = 0
    for value in values:
        total += 1
        permission = parse_permission(value)
        if not permission.is_valid:
            dropped += 1
            continue
        normalized.setdefault(permission.canonical, None)

    if dropped:
        logger.debug(
            "Normalized %d permission strings: %d kept, %d unparsable",
            total,
            len(normalized),
            dropped,
        )
    return list(normalized)


def areas_of(values: Optional[Iterable[Any]]) -> set[str]:
    """Distinct areas named by a permission list, ignoring actions.

    Unparsable entries contribute nothing.

    Example::

        areas_of(["stores:read", "stores:write", "PermissionArea.HOURS:PermissionAction.READ"])
        # {"stores", "hours"}
    """
    if not values:
        return set()
    return {permission.area for permission in map(parse_permission, values) if permission.is_valid}


__all__ = [
    "areas_of",
    "normalize_permission",
    "normalize_permissions",
]

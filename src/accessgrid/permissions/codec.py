"""Conversion between permission strings and ``(area, action)`` pairs.

Two surface syntaxes are accepted:

- canonical: ``users:read`` (lower-case, one ``:`` separator)
- verbose:   ``PermissionArea.USERS:PermissionAction.READ`` (backend payloads)

Parsing tries the verbose pattern first, then a plain split. Input that
matches neither yields the empty :class:`Permission` and a warning on this
module's logger; it is never an exception.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, NamedTuple, Optional

from ..exceptions import InvalidPermissionError
from .constants import ACTION_LABELS

logger = logging.getLogger(__name__)

SEPARATOR = ":"
VERBOSE_AREA_PREFIX = "PermissionArea."
VERBOSE_ACTION_PREFIX = "PermissionAction."

_VERBOSE_PATTERN = re.compile(r"PermissionArea\.(\w+):PermissionAction\.(\w+)", re.IGNORECASE)


class Permission(NamedTuple):
    """A parsed permission. Compares equal to a plain ``(area, action)`` tuple."""

    area: str
    action: str

    @property
    def is_valid(self) -> bool:
        return bool(self.area) and bool(self.action)

    @property
    def canonical(self) -> str:
        return format_permission(self.area, self.action)

    @property
    def verbose(self) -> str:
        return format_verbose(self.area, self.action)


EMPTY_PERMISSION = Permission("", "")


def format_permission(area: str, action: str) -> str:
    """Build the canonical ``area:action`` string.

    Both parts are lower-cased; nothing else is validated, so empty
    inputs produce ``":"``.

    Example::

        format_permission("Users", "READ")  # "users:read"
    """
    return f"{area.lower()}{SEPARATOR}{action.lower()}"


def format_verbose(area: str, action: str) -> str:
    """Build the verbose backend string, both parts upper-cased.

    Example::

        format_verbose("stock_requests", "write")
        # "PermissionArea.STOCK_REQUESTS:PermissionAction.WRITE"
    """
    return f"{VERBOSE_AREA_PREFIX}{area.upper()}{SEPARATOR}{VERBOSE_ACTION_PREFIX}{action.upper()}"


def _parse_verbose(value: str) -> Optional[Permission]:
    if VERBOSE_AREA_PREFIX not in value:
        return None
    match = _VERBOSE_PATTERN.search(value)
    if match is None:
        return None
    area, action = match.groups()
    return Permission(area.lower(), action.lower())


def _parse_canonical(value: str) -> Optional[Permission]:
    segments = value.split(SEPARATOR)
    if len(segments) != 2 or not all(segments):
        return None
    area, action = segments
    return Permission(area.lower(), action.lower())


def parse_permission(value: Any) -> Permission:
    """Parse a permission string in either syntax.

    Checks in order:
    1. verbose ``PermissionArea.X:PermissionAction.Y``; the ``PermissionArea.`` marker
       must appear as written, the rest of the pattern ignores case
    2. canonical ``area:action`` with exactly two non-empty segments

    Args:
        value: Raw permission string.

    Returns:
        Lower-cased :class:`Permission`, or :data:`EMPTY_PERMISSION` when the
        input matches neither syntax (including non-string input).

    Example::

        parse_permission("PermissionArea.USERS:PermissionAction.READ")  # ("users", "read")
        parse_permission("Hours:Approve")                              # ("hours", "approve")
        parse_permission("users")                                      # ("", "")
    """
    if isinstance(value, str):
        parsed = _parse_verbose(value) or _parse_canonical(value)
        if parsed is not None:
            return parsed

    logger.warning("Unparsable permission string", extra={"permission": value})
    return EMPTY_PERMISSION


def require_permission(value: Any) -> Permission:
    """Strict variant of :func:`parse_permission` for callers that want errors.

    Raises:
        InvalidPermissionError: If ``value`` matches neither syntax.
    """
    permission = parse_permission(value)
    if not permission.is_valid:
        raise InvalidPermissionError(value)
    return permission


def to_backend_form(permissions: Optional[Iterable[str]]) -> list[str]:
    """Convert permissions to the verbose backend syntax.

    The output is one-to-one with the input. Unparsable entries are not
    dropped; they become the degenerate ``PermissionArea.:PermissionAction.``.

    Example::

        to_backend_form(["users:read"])
        # ["PermissionArea.USERS:PermissionAction.READ"]
    """
    if not permissions:
        return []
    return [parse_permission(value).verbose for value in permissions]


def display_permission(value: Any) -> str:
    """Human-readable label, e.g. ``"Hours - Approve"`` or ``"Users - View"``.

    Returns an empty string for unparsable input.
    """
    permission = parse_permission(value)
    if not permission.is_valid:
        return ""
    area, action = permission
    action_label = ACTION_LABELS.get(action, action[:1].upper() + action[1:])
    return f"{area[:1].upper()}{area[1:]} - {action_label}"


__all__ = [
    "EMPTY_PERMISSION",
    "Permission",
    "display_permission",
    "format_permission",
    "format_verbose",
    "parse_permission",
    "require_permission",
    "to_backend_form",
]

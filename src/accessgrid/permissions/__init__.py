"""Permission string engine for accessgrid.

Defines:
- Permission / codec: canonical ``area:action`` and verbose
  ``PermissionArea.X:PermissionAction.Y`` conversion
- normalize_permissions(): canonicalize and deduplicate raw lists
- has_permission(): area+action check with singular/plural tolerance
- get_permission_hierarchy(): area → actions matrix for editors
"""

from .access import (
    areas_with_any_permission,
    has_all_permissions,
    has_any_for_area,
    has_any_permission,
    has_permission,
    permissions_for_area,
    principal_tier,
)
from .codec import (
    EMPTY_PERMISSION,
    Permission,
    display_permission,
    format_permission,
    format_verbose,
    parse_permission,
    require_permission,
    to_backend_form,
)
from .constants import ACTION_LABELS, PermissionAction, PermissionArea, PrincipalTier
from .hierarchy import all_permissions, get_permission_hierarchy, toggle_permission
from .normalize import areas_of, normalize_permission, normalize_permissions

__all__ = [
    "ACTION_LABELS",
    "EMPTY_PERMISSION",
    "Permission",
    "PermissionAction",
    "PermissionArea",
    "PrincipalTier",
    "all_permissions",
    "areas_of",
    "areas_with_any_permission",
    "display_permission",
    "format_permission",
    "format_verbose",
    "get_permission_hierarchy",
    "has_all_permissions",
    "has_any_for_area",
    "has_any_permission",
    "has_permission",
    "normalize_permission",
    "normalize_permissions",
    "parse_permission",
    "permissions_for_area",
    "principal_tier",
    "require_permission",
    "to_backend_form",
    "toggle_permission",
]

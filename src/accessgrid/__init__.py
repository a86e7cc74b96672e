from .config import AccessGridConfig, LogLevel, load_config_from_env
from .exceptions import AccessGridError, ConfigurationError, InvalidPermissionError
from .logging import AccessGridFormatter, safe_preview, setup_logging
from .permissions import (
    ACTION_LABELS,
    EMPTY_PERMISSION,
    Permission,
    PermissionAction,
    PermissionArea,
    PrincipalTier,
    all_permissions,
    areas_of,
    areas_with_any_permission,
    display_permission,
    format_permission,
    format_verbose,
    get_permission_hierarchy,
    has_all_permissions,
    has_any_for_area,
    has_any_permission,
    has_permission,
    normalize_permission,
    normalize_permissions,
    parse_permission,
    permissions_for_area,
    principal_tier,
    require_permission,
    to_backend_form,
    toggle_permission,
)

__all__ = [
    'AccessGridConfig',
    'LogLevel',
    'load_config_from_env',
    'AccessGridError',
    'ConfigurationError',
    'InvalidPermissionError',
    'AccessGridFormatter',
    'safe_preview',
    'setup_logging',
    'ACTION_LABELS',
    'EMPTY_PERMISSION',
    'Permission',
    'PermissionAction',
    'PermissionArea',
    'PrincipalTier',
    'all_permissions',
    'areas_of',
    'areas_with_any_permission',
    'display_permission',
    'format_permission',
    'format_verbose',
    'get_permission_hierarchy',
    'has_all_permissions',
    'has_any_for_area',
    'has_any_permission',
    'has_permission',
    'normalize_permission',
    'normalize_permissions',
    'parse_permission',
    'permissions_for_area',
    'principal_tier',
    'require_permission',
    'to_backend_form',
    'toggle_permission',
]

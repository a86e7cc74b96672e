"""Known permission areas, actions and principal tiers.

Provides:
- ``PermissionArea``: functional areas permissions are scoped to.
- ``PermissionAction``: operation kinds within an area.
- ``ACTION_LABELS``: display labels for actions.
- ``PrincipalTier``: coarse tiers derived from a permission set.

The enumerations are the closed sets the application knows about. They
are not a whitelist: unknown areas and actions pass through the codec
and matcher untouched.
"""

from __future__ import annotations

from enum import Enum


class PermissionArea(str, Enum):
    """Functional areas of the application.

    The member name is the token used by the verbose backend form
    (``PermissionArea.USERS``); the value is the canonical token (``users``).
    """

    USERS = "users"
    ROLES = "roles"
    STORES = "stores"
    EMPLOYEES = "employees"
    HOURS = "hours"
    PAYMENTS = "payments"
    INVENTORY = "inventory"
    STOCK_REQUESTS = "stock_requests"
    SALES = "sales"
    REPORTS = "reports"


class PermissionAction(str, Enum):
    """Operation kinds performed within an area."""

    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    APPROVE = "approve"


ACTION_LABELS: dict[str, str] = {
    PermissionAction.READ.value: "View",
    PermissionAction.WRITE.value: "Create/Edit",
    PermissionAction.DELETE.value: "Delete",
    PermissionAction.APPROVE.value: "Approve",
}


class PrincipalTier:
    """Coarse access tier of a principal, derived from held permissions.

    Not a role: a label dashboards use to choose a layout. See
    :func:`accessgrid.permissions.principal_tier`.
    """

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"
    UNKNOWN = "unknown"

    ALL = frozenset({"admin", "manager", "employee", "unknown"})


__all__ = [
    "ACTION_LABELS",
    "PermissionAction",
    "PermissionArea",
    "PrincipalTier",
]

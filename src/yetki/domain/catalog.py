"""Permission catalog - every permission the application knows about.

Defined once at import time and never mutated. Resolution itself does not
consult the catalog; it is the source for templates, labels and grouping.
"""

from yetki.domain.entities import Permission
from yetki.domain.value_objects import PermissionModule

PERMISSIONS: tuple[Permission, ...] = (
    # Sales
    Permission("sales.create", "Create sales", "Can create a new sale", PermissionModule.SALES),
    Permission("sales.view", "View sales", "Can view all sales", PermissionModule.SALES),
    Permission("sales.edit", "Edit sales", "Can edit existing sales", PermissionModule.SALES),
    # Approvals
    Permission(
        "approvals.view",
        "View approvals",
        "Can view operations waiting for approval",
        PermissionModule.APPROVALS,
    ),
    Permission(
        "approvals.approve",
        "Approve",
        "Can approve or reject operations",
        PermissionModule.APPROVALS,
    ),
    # Customers
    Permission(
        "customers.view", "View customers", "Can view the customer list", PermissionModule.CUSTOMERS
    ),
    Permission(
        "customers.create", "Create customers", "Can add new customers", PermissionModule.CUSTOMERS
    ),
    Permission(
        "customers.edit", "Edit customers", "Can edit customer details", PermissionModule.CUSTOMERS
    ),
    Permission(
        "customers.delete", "Delete customers", "Can delete customers", PermissionModule.CUSTOMERS
    ),
    # Orders
    Permission("orders.view", "View orders", "Can view the order list", PermissionModule.ORDERS),
    Permission("orders.create", "Create orders", "Can place new orders", PermissionModule.ORDERS),
    Permission("orders.prepare", "Prepare orders", "Can prepare orders", PermissionModule.ORDERS),
    Permission("orders.deliver", "Deliver orders", "Can deliver orders", PermissionModule.ORDERS),
    # Payments
    Permission(
        "payments.create", "Collect payments", "Can collect payments", PermissionModule.PAYMENTS
    ),
    Permission(
        "payments.view", "View payments", "Can view payment history", PermissionModule.PAYMENTS
    ),
    # Reports
    Permission("reports.view", "View reports", "Can view reports", PermissionModule.REPORTS),
    Permission("reports.export", "Export reports", "Can export reports", PermissionModule.REPORTS),
    # Settings
    Permission(
        "settings.view", "View settings", "Can view system settings", PermissionModule.SETTINGS
    ),
    Permission(
        "settings.edit", "Edit settings", "Can edit system settings", PermissionModule.SETTINGS
    ),
)

_BY_ID: dict[str, Permission] = {p.id: p for p in PERMISSIONS}


def get_permission(permission_id: str) -> Permission | None:
    """Get catalog permission by id."""
    return _BY_ID.get(permission_id)


def is_known_permission(permission_id: str) -> bool:
    return permission_id in _BY_ID


def permission_ids() -> tuple[str, ...]:
    """All permission ids in catalog order."""
    return tuple(p.id for p in PERMISSIONS)


def group_by_module() -> dict[PermissionModule, list[Permission]]:
    """Group catalog permissions by feature module, preserving catalog order."""
    groups: dict[PermissionModule, list[Permission]] = {}
    for permission in PERMISSIONS:
        groups.setdefault(permission.module, []).append(permission)
    return groups

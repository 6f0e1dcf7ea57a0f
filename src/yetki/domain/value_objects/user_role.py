"""User roles."""

from enum import StrEnum


class UserRole(StrEnum):
    """Roles a user can hold. ADMIN bypasses permission resolution."""

    ADMIN = "admin"
    SUPERVISOR = "supervisor"
    MANAGER = "manager"
    SALES = "sales"
    WAREHOUSE = "warehouse"
    ACCOUNTING = "accounting"

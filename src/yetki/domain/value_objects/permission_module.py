"""Feature modules that group permissions."""

from enum import StrEnum


class PermissionModule(StrEnum):
    """Feature area a permission belongs to."""

    SALES = "sales"
    INVENTORY = "inventory"
    CUSTOMERS = "customers"
    ORDERS = "orders"
    PAYMENTS = "payments"
    APPROVALS = "approvals"
    REPORTS = "reports"
    SETTINGS = "settings"
    CALENDAR = "calendar"

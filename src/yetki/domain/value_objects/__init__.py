"""Domain value objects."""

from yetki.domain.value_objects.access_type import AccessType
from yetki.domain.value_objects.duration_unit import DurationUnit
from yetki.domain.value_objects.notification_type import NotificationType
from yetki.domain.value_objects.permission_module import PermissionModule
from yetki.domain.value_objects.request_status import Decision, RequestStatus
from yetki.domain.value_objects.user_role import UserRole

__all__ = [
    "AccessType",
    "Decision",
    "DurationUnit",
    "NotificationType",
    "PermissionModule",
    "RequestStatus",
    "UserRole",
]

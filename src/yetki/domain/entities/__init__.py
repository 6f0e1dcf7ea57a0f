"""Domain entities."""

from yetki.domain.entities.access_request import AccessRequest
from yetki.domain.entities.grant_set import RoleDefaults, UserOverrides
from yetki.domain.entities.notification import Notification
from yetki.domain.entities.permission import Permission, PermissionGrant
from yetki.domain.entities.scheduled_revocation import ScheduledRevocation
from yetki.domain.entities.user import User

__all__ = [
    "AccessRequest",
    "Notification",
    "Permission",
    "PermissionGrant",
    "RoleDefaults",
    "ScheduledRevocation",
    "User",
    "UserOverrides",
]

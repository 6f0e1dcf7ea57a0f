"""Repository ports."""

from yetki.application.ports.repositories.access_request_repository import (
    AccessRequestRepository,
)
from yetki.application.ports.repositories.revocation_repository import (
    RevocationRepository,
)
from yetki.application.ports.repositories.role_default_repository import (
    RoleDefaultRepository,
)
from yetki.application.ports.repositories.user_override_repository import (
    UserOverrideRepository,
)

__all__ = [
    "AccessRequestRepository",
    "RevocationRepository",
    "RoleDefaultRepository",
    "UserOverrideRepository",
]

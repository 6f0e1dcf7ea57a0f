"""Permission entities - catalog entries and allow/deny grants."""

from dataclasses import dataclass

from yetki.domain.value_objects import PermissionModule


@dataclass(frozen=True)
class Permission:
    """Permission - an action a user may be allowed to perform."""

    id: str
    name: str
    description: str
    module: PermissionModule


@dataclass(frozen=True)
class PermissionGrant:
    """One allow/deny entry of a role-default or override set."""

    permission_id: str
    allowed: bool

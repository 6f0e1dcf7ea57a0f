"""JSON-compatible codecs for persisted collections."""

from datetime import datetime
from typing import Any

from yetki.application.dto.access_request_dto import (
    access_request_from_dict,
    access_request_to_dict,
)
from yetki.domain.entities import RoleDefaults, ScheduledRevocation, UserOverrides
from yetki.domain.value_objects import UserRole

__all__ = [
    "access_request_from_dict",
    "access_request_to_dict",
    "overrides_from_dict",
    "overrides_to_dict",
    "revocation_from_dict",
    "revocation_to_dict",
    "role_defaults_from_dict",
    "role_defaults_to_dict",
]


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _parse(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def role_defaults_to_dict(defaults: RoleDefaults) -> dict[str, Any]:
    return {
        "role": defaults.role.value,
        "grants": dict(defaults.grants),
        "updated_at": _iso(defaults.updated_at),
    }


def role_defaults_from_dict(data: dict[str, Any]) -> RoleDefaults:
    return RoleDefaults(
        role=UserRole(data["role"]),
        grants=data.get("grants") or {},
        updated_at=_parse(data.get("updated_at")),
    )


def overrides_to_dict(overrides: UserOverrides) -> dict[str, Any]:
    return {
        "user_id": overrides.user_id,
        "grants": dict(overrides.grants),
        "updated_at": _iso(overrides.updated_at),
    }


def overrides_from_dict(data: dict[str, Any]) -> UserOverrides:
    return UserOverrides(
        user_id=data["user_id"],
        grants=data.get("grants") or {},
        updated_at=_parse(data.get("updated_at")),
    )


def revocation_to_dict(revocation: ScheduledRevocation) -> dict[str, Any]:
    return {
        "request_id": revocation.request_id,
        "user_id": revocation.user_id,
        "permission_id": revocation.permission_id,
        "permission_name": revocation.permission_name,
        "valid_until": revocation.valid_until.isoformat(),
    }


def revocation_from_dict(data: dict[str, Any]) -> ScheduledRevocation:
    return ScheduledRevocation(
        request_id=data["request_id"],
        user_id=data["user_id"],
        permission_id=data["permission_id"],
        permission_name=data["permission_name"],
        valid_until=datetime.fromisoformat(data["valid_until"]),
    )


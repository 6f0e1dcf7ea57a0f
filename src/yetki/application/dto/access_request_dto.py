"""Access request DTOs."""

from datetime import datetime
from typing import Any

from yetki.domain.entities import AccessRequest
from yetki.domain.value_objects import AccessType, DurationUnit, RequestStatus


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _parse(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def access_request_to_dict(request: AccessRequest) -> dict[str, Any]:
    """JSON-compatible representation, used for persistence and notification payloads."""
    return {
        "id": request.id,
        "user_id": request.user_id,
        "user_name": request.user_name,
        "permission_id": request.permission_id,
        "permission_name": request.permission_name,
        "access_type": request.access_type.value,
        "duration": request.duration,
        "duration_unit": request.duration_unit.value if request.duration_unit else None,
        "status": request.status.value,
        "requested_at": _iso(request.requested_at),
        "responded_at": _iso(request.responded_at),
        "responded_by": request.responded_by,
        "valid_until": _iso(request.valid_until),
        "note": request.note,
    }


def access_request_from_dict(data: dict[str, Any]) -> AccessRequest:
    unit = data.get("duration_unit")
    return AccessRequest(
        id=data["id"],
        user_id=data["user_id"],
        user_name=data["user_name"],
        permission_id=data["permission_id"],
        permission_name=data["permission_name"],
        access_type=AccessType(data["access_type"]),
        duration=data.get("duration"),
        duration_unit=DurationUnit(unit) if unit else None,
        status=RequestStatus(data["status"]),
        requested_at=_parse(data["requested_at"]),
        responded_at=_parse(data.get("responded_at")),
        responded_by=data.get("responded_by"),
        valid_until=_parse(data.get("valid_until")),
        note=data.get("note"),
    )

"""Grant entry DTOs."""

from collections.abc import Iterable, Mapping
from typing import Any

from yetki.domain.entities import PermissionGrant
from yetki.domain.exceptions import ValidationError

GrantEntries = Mapping[str, bool] | Iterable[PermissionGrant | Mapping[str, Any]]

_ID_KEYS = ("permission_id", "permission", "id")


def normalize_grants(entries: GrantEntries) -> dict[str, bool]:
    """Normalize grant entries to ``{permission_id: allowed}``.

    Accepts a mapping, ``PermissionGrant`` objects, or dicts carrying one of
    ``permission_id`` / ``permission`` / ``id`` plus ``allowed``. Later
    entries for the same id win.
    """
    if isinstance(entries, Mapping):
        return {str(k): _as_bool(k, v) for k, v in entries.items()}

    grants: dict[str, bool] = {}
    for entry in entries:
        if isinstance(entry, PermissionGrant):
            grants[entry.permission_id] = entry.allowed
            continue
        if not isinstance(entry, Mapping):
            raise ValidationError(f"Unsupported grant entry: {entry!r}")
        permission_id = next((entry[k] for k in _ID_KEYS if k in entry), None)
        if not permission_id:
            raise ValidationError(f"Grant entry has no permission id: {entry!r}")
        if "allowed" not in entry:
            raise ValidationError(f"Grant entry for {permission_id} has no 'allowed' flag")
        grants[str(permission_id)] = _as_bool(permission_id, entry["allowed"])
    return grants


def _as_bool(permission_id: object, value: object) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"'allowed' for {permission_id} must be a boolean")
    return value

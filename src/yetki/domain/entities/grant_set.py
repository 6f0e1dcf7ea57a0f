"""Grant sets - role defaults and per-user overrides."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from yetki.domain.value_objects import UserRole


def _freeze(grants: Mapping[str, bool]) -> Mapping[str, bool]:
    return MappingProxyType({str(k): bool(v) for k, v in grants.items()})


@dataclass(frozen=True)
class RoleDefaults:
    """Baseline decision per permission for one role. Replaced as a whole."""

    role: UserRole
    grants: Mapping[str, bool] = field(default_factory=dict)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "grants", _freeze(self.grants))


@dataclass(frozen=True)
class UserOverrides:
    """Sparse per-user exceptions to role defaults."""

    user_id: str
    grants: Mapping[str, bool] = field(default_factory=dict)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "grants", _freeze(self.grants))

    def merged(self, entries: Mapping[str, bool], updated_at: datetime) -> "UserOverrides":
        """Return a new set with entries merged in, new entries win."""
        return UserOverrides(
            user_id=self.user_id,
            grants={**self.grants, **entries},
            updated_at=updated_at,
        )

    def without(self, permission_id: str, updated_at: datetime) -> "UserOverrides":
        """Return a new set with one entry removed."""
        grants = {k: v for k, v in self.grants.items() if k != permission_id}
        return UserOverrides(user_id=self.user_id, grants=grants, updated_at=updated_at)

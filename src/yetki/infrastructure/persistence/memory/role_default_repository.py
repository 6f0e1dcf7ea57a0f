"""In-memory role default repository."""

from typing import Any

from yetki.domain.entities import RoleDefaults
from yetki.domain.value_objects import UserRole
from yetki.infrastructure.persistence.codec import role_defaults_from_dict, role_defaults_to_dict


class InMemoryRoleDefaultRepository:
    """Role defaults keyed by role. Writes swap in a new map."""

    collection = "role_defaults"

    def __init__(self) -> None:
        self._by_role: dict[str, RoleDefaults] = {}
        self.dirty = False

    async def get(self, role: UserRole | str) -> RoleDefaults | None:
        return self._by_role.get(str(role))

    async def list_all(self) -> list[RoleDefaults]:
        return list(self._by_role.values())

    async def replace(self, defaults: RoleDefaults) -> None:
        self._by_role = {**self._by_role, defaults.role.value: defaults}
        self.dirty = True

    async def delete(self, role: UserRole | str) -> None:
        if str(role) in self._by_role:
            self._by_role = {k: v for k, v in self._by_role.items() if k != str(role)}
            self.dirty = True

    def dump(self) -> list[dict[str, Any]]:
        return [role_defaults_to_dict(d) for d in self._by_role.values()]

    def load(self, data: list[dict[str, Any]] | None) -> None:
        items = [role_defaults_from_dict(d) for d in data or []]
        self._by_role = {d.role.value: d for d in items}
        self.dirty = False

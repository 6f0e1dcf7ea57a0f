"""In-memory user override repository."""

from typing import Any

from yetki.domain.entities import UserOverrides
from yetki.infrastructure.persistence.codec import overrides_from_dict, overrides_to_dict


class InMemoryUserOverrideRepository:
    """User overrides keyed by user id. Writes swap in a new map."""

    collection = "user_overrides"

    def __init__(self) -> None:
        self._by_user: dict[str, UserOverrides] = {}
        self.dirty = False

    async def get(self, user_id: str) -> UserOverrides | None:
        return self._by_user.get(user_id)

    async def list_all(self) -> list[UserOverrides]:
        return list(self._by_user.values())

    async def save(self, overrides: UserOverrides) -> None:
        self._by_user = {**self._by_user, overrides.user_id: overrides}
        self.dirty = True

    def dump(self) -> list[dict[str, Any]]:
        return [overrides_to_dict(o) for o in self._by_user.values()]

    def load(self, data: list[dict[str, Any]] | None) -> None:
        items = [overrides_from_dict(d) for d in data or []]
        self._by_user = {o.user_id: o for o in items}
        self.dirty = False

"""In-memory scheduled revocation repository."""

from typing import Any

from yetki.domain.entities import ScheduledRevocation
from yetki.infrastructure.persistence.codec import revocation_from_dict, revocation_to_dict


class InMemoryRevocationRepository:
    """Pending revocations keyed by request id."""

    collection = "pending_revocations"

    def __init__(self) -> None:
        self._by_request: dict[str, ScheduledRevocation] = {}
        self.dirty = False

    async def get(self, request_id: str) -> ScheduledRevocation | None:
        return self._by_request.get(request_id)

    async def list_all(self) -> list[ScheduledRevocation]:
        return list(self._by_request.values())

    async def list_for_grant(self, user_id: str, permission_id: str) -> list[ScheduledRevocation]:
        return [
            r
            for r in self._by_request.values()
            if r.user_id == user_id and r.permission_id == permission_id
        ]

    async def create(self, revocation: ScheduledRevocation) -> None:
        self._by_request = {**self._by_request, revocation.request_id: revocation}
        self.dirty = True

    async def delete(self, request_id: str) -> bool:
        if request_id not in self._by_request:
            return False
        self._by_request = {k: v for k, v in self._by_request.items() if k != request_id}
        self.dirty = True
        return True

    def dump(self) -> list[dict[str, Any]]:
        return [revocation_to_dict(r) for r in self._by_request.values()]

    def load(self, data: list[dict[str, Any]] | None) -> None:
        items = [revocation_from_dict(d) for d in data or []]
        self._by_request = {r.request_id: r for r in items}
        self.dirty = False

"""In-memory access request repository."""

from dataclasses import replace
from typing import Any

from yetki.domain.entities import AccessRequest
from yetki.domain.value_objects import RequestStatus
from yetki.infrastructure.persistence.codec import (
    access_request_from_dict,
    access_request_to_dict,
)


class InMemoryAccessRequestRepository:
    """Access requests keyed by id.

    Stores and hands out copies, so a request being decided is invisible to
    readers until update() swaps it in.
    """

    collection = "access_requests"

    def __init__(self) -> None:
        self._by_id: dict[str, AccessRequest] = {}
        self.dirty = False

    async def get_by_id(self, request_id: str) -> AccessRequest | None:
        request = self._by_id.get(request_id)
        return replace(request) if request else None

    async def list_all(self) -> list[AccessRequest]:
        return [replace(r) for r in self._by_id.values()]

    async def list_by_status(self, status: RequestStatus) -> list[AccessRequest]:
        return [replace(r) for r in self._by_id.values() if r.status == status]

    async def list_by_user(self, user_id: str) -> list[AccessRequest]:
        return [replace(r) for r in self._by_id.values() if r.user_id == user_id]

    async def find_pending(self, user_id: str, permission_id: str) -> AccessRequest | None:
        for r in self._by_id.values():
            if (
                r.user_id == user_id
                and r.permission_id == permission_id
                and r.status == RequestStatus.PENDING
            ):
                return replace(r)
        return None

    async def create(self, request: AccessRequest) -> AccessRequest:
        self._by_id = {**self._by_id, request.id: replace(request)}
        self.dirty = True
        return request

    async def update(self, request: AccessRequest) -> None:
        self._by_id = {**self._by_id, request.id: replace(request)}
        self.dirty = True

    def dump(self) -> list[dict[str, Any]]:
        return [access_request_to_dict(r) for r in self._by_id.values()]

    def load(self, data: list[dict[str, Any]] | None) -> None:
        items = [access_request_from_dict(d) for d in data or []]
        self._by_id = {r.id: r for r in items}
        self.dirty = False

"""Access request repository port."""

from typing import Protocol

from yetki.domain.entities import AccessRequest
from yetki.domain.value_objects import RequestStatus


class AccessRequestRepository(Protocol):
    """Port for access request persistence."""

    async def get_by_id(self, request_id: str) -> AccessRequest | None: ...

    async def list_all(self) -> list[AccessRequest]: ...

    async def list_by_status(self, status: RequestStatus) -> list[AccessRequest]: ...

    async def list_by_user(self, user_id: str) -> list[AccessRequest]: ...

    async def find_pending(self, user_id: str, permission_id: str) -> AccessRequest | None: ...

    async def create(self, request: AccessRequest) -> AccessRequest: ...

    async def update(self, request: AccessRequest) -> None: ...

"""Scheduled revocation repository port."""

from typing import Protocol

from yetki.domain.entities import ScheduledRevocation


class RevocationRepository(Protocol):
    """Port for durable pending-expiry records."""

    async def get(self, request_id: str) -> ScheduledRevocation | None: ...

    async def list_all(self) -> list[ScheduledRevocation]: ...

    async def list_for_grant(self, user_id: str, permission_id: str) -> list[ScheduledRevocation]: ...

    async def create(self, revocation: ScheduledRevocation) -> None: ...

    async def delete(self, request_id: str) -> bool: ...

"""User override repository port."""

from typing import Protocol

from yetki.domain.entities import UserOverrides


class UserOverrideRepository(Protocol):
    """Port for per-user override persistence."""

    async def get(self, user_id: str) -> UserOverrides | None: ...

    async def list_all(self) -> list[UserOverrides]: ...

    async def save(self, overrides: UserOverrides) -> None: ...

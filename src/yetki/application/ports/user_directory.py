"""User directory port - identity collaborator."""

from typing import Protocol

from yetki.domain.entities import User


class UserDirectory(Protocol):
    """Port for looking up users by id."""

    async def get_by_id(self, user_id: str) -> User | None: ...

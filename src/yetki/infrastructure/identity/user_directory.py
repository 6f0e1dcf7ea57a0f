"""In-memory user directory."""

from collections.abc import Iterable

from yetki.domain.entities import User
from yetki.domain.value_objects import UserRole

ADMIN_USER = User(id="admin", name="Admin", role=UserRole.ADMIN, email="admin@example.com")


class InMemoryUserDirectory:
    """Users keyed by id, seeded with the built-in admin."""

    def __init__(self, users: Iterable[User] | None = None) -> None:
        self._by_id: dict[str, User] = {ADMIN_USER.id: ADMIN_USER}
        for user in users or []:
            self._by_id[user.id] = user

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)

    def add(self, user: User) -> None:
        self._by_id[user.id] = user

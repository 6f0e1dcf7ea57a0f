"""User entity as seen by the authorization core."""

from dataclasses import dataclass

from yetki.domain.value_objects import UserRole


@dataclass
class User:
    """User - identity and role supplied by the user store."""

    id: str
    name: str
    role: UserRole | str
    email: str | None = None
    active: bool = True

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

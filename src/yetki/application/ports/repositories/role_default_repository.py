"""Role default repository port."""

from typing import Protocol

from yetki.domain.entities import RoleDefaults
from yetki.domain.value_objects import UserRole


class RoleDefaultRepository(Protocol):
    """Port for role-default persistence. Sets are replaced whole."""

    async def get(self, role: UserRole) -> RoleDefaults | None: ...

    async def list_all(self) -> list[RoleDefaults]: ...

    async def replace(self, defaults: RoleDefaults) -> None: ...

    async def delete(self, role: UserRole) -> None: ...

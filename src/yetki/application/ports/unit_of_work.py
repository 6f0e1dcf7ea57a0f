"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from yetki.application.ports.repositories.access_request_repository import (
    AccessRequestRepository,
)
from yetki.application.ports.repositories.revocation_repository import (
    RevocationRepository,
)
from yetki.application.ports.repositories.role_default_repository import (
    RoleDefaultRepository,
)
from yetki.application.ports.repositories.user_override_repository import (
    UserOverrideRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def role_defaults(self) -> RoleDefaultRepository: ...

    @property
    def overrides(self) -> UserOverrideRepository: ...

    @property
    def access_requests(self) -> AccessRequestRepository: ...

    @property
    def revocations(self) -> RevocationRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...

"""In-memory Unit of Work with a key-value save/load hook."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from yetki.application.ports import KeyValueStore
from yetki.infrastructure.persistence.memory.access_request_repository import (
    InMemoryAccessRequestRepository,
)
from yetki.infrastructure.persistence.memory.revocation_repository import (
    InMemoryRevocationRepository,
)
from yetki.infrastructure.persistence.memory.role_default_repository import (
    InMemoryRoleDefaultRepository,
)
from yetki.infrastructure.persistence.memory.user_override_repository import (
    InMemoryUserOverrideRepository,
)

logger = logging.getLogger(__name__)


class InMemoryAccessState:
    """The four access-control tables, shared by all units of work."""

    def __init__(self) -> None:
        self.role_defaults = InMemoryRoleDefaultRepository()
        self.overrides = InMemoryUserOverrideRepository()
        self.access_requests = InMemoryAccessRequestRepository()
        self.revocations = InMemoryRevocationRepository()

    @property
    def repositories(self) -> tuple:
        return (self.role_defaults, self.overrides, self.access_requests, self.revocations)

    @property
    def dirty(self) -> bool:
        return any(repo.dirty for repo in self.repositories)

    async def load(self, store: KeyValueStore) -> None:
        """Replace in-memory state with the collections held by store."""
        for repo in self.repositories:
            repo.load(await store.get(repo.collection))
        logger.debug("Access state loaded from store")

    async def save(self, store: KeyValueStore) -> None:
        """Write every changed collection to store in a single call.

        Dirty flags are cleared only once the store accepted the write, so a
        failed save leaves the changes visible to rollback.
        """
        dirty = [repo for repo in self.repositories if repo.dirty]
        if not dirty:
            return
        await store.set_many({repo.collection: repo.dump() for repo in dirty})
        for repo in dirty:
            repo.dirty = False


class InMemoryUnitOfWork:
    """Unit of Work over InMemoryAccessState. Commit persists, rollback reloads from the store."""

    def __init__(self, state: InMemoryAccessState, store: KeyValueStore) -> None:
        self._state = state
        self._store = store

    @property
    def role_defaults(self) -> InMemoryRoleDefaultRepository:
        return self._state.role_defaults

    @property
    def overrides(self) -> InMemoryUserOverrideRepository:
        return self._state.overrides

    @property
    def access_requests(self) -> InMemoryAccessRequestRepository:
        return self._state.access_requests

    @property
    def revocations(self) -> InMemoryRevocationRepository:
        return self._state.revocations

    async def commit(self) -> None:
        await self._state.save(self._store)

    async def rollback(self) -> None:
        if self._state.dirty:
            await self._state.load(self._store)


def create_uow_factory(state: InMemoryAccessState, store: KeyValueStore) -> object:
    """Create UnitOfWork factory (async context manager).

    Units of work run one at a time: the lock is held across the body, commit
    and rollback, so any dirty collection belongs to the current unit.
    """
    lock = asyncio.Lock()

    @asynccontextmanager
    async def factory() -> AsyncIterator[InMemoryUnitOfWork]:
        async with lock:
            uow = InMemoryUnitOfWork(state, store)
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory

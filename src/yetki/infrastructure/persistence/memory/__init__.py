"""In-memory persistence backed by a key-value store."""

from yetki.infrastructure.persistence.memory.key_value_store import InMemoryKeyValueStore
from yetki.infrastructure.persistence.memory.unit_of_work import (
    InMemoryAccessState,
    InMemoryUnitOfWork,
    create_uow_factory,
)

__all__ = [
    "InMemoryAccessState",
    "InMemoryKeyValueStore",
    "InMemoryUnitOfWork",
    "create_uow_factory",
]

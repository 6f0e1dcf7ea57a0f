"""Key-value store port - whole-collection persistence."""

from collections.abc import Mapping
from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Stores JSON-compatible values under string keys."""

    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any) -> None: ...

    async def set_many(self, items: Mapping[str, Any]) -> None:
        """Write all items or none of them."""
        ...

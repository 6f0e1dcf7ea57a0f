"""In-memory key-value store."""

import json
from collections.abc import Mapping
from typing import Any


class InMemoryKeyValueStore:
    """Process-local store. Values are JSON round-tripped so callers never share state."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> Any | None:
        raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)

    async def set_many(self, items: Mapping[str, Any]) -> None:
        encoded = {key: json.dumps(value) for key, value in items.items()}
        self._data.update(encoded)

    def keys(self) -> list[str]:
        return sorted(self._data)

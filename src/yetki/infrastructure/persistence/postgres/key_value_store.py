"""PostgreSQL key-value store - one jsonb row per collection."""

from collections.abc import Mapping
from typing import Any

from psycopg import sql
from psycopg.types.json import Jsonb
from psycopg_pool import AsyncConnectionPool


class PostgresKeyValueStore:
    """Key-value store implementation on a single table.

    Table layout (see alembic revision 001):
    ``key text primary key, value jsonb not null, updated_at timestamptz``.
    """

    def __init__(self, pool: AsyncConnectionPool, table: str = "access_control_state") -> None:
        self._pool = pool
        self._table = sql.Identifier(table)
        self._upsert = sql.SQL(
            "INSERT INTO {} (key, value, updated_at) VALUES (%s, %s, now()) "
            "ON CONFLICT (key) DO UPDATE "
            "SET value = EXCLUDED.value, updated_at = EXCLUDED.updated_at"
        ).format(self._table)

    async def get(self, key: str) -> Any | None:
        """Get value stored under key."""
        async with self._pool.connection() as conn:
            cur = await conn.execute(
                sql.SQL("SELECT value FROM {} WHERE key = %s").format(self._table),
                (key,),
            )
            r = await cur.fetchone()
        if not r:
            return None
        return r[0]

    async def set(self, key: str, value: Any) -> None:
        """Insert or replace value under key."""
        async with self._pool.connection() as conn:
            await conn.execute(self._upsert, (key, Jsonb(value)))

    async def set_many(self, items: Mapping[str, Any]) -> None:
        """Upsert every item in one transaction."""
        async with self._pool.connection() as conn:
            async with conn.transaction():
                for key, value in items.items():
                    await conn.execute(self._upsert, (key, Jsonb(value)))

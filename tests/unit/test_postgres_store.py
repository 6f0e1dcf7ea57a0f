"""Unit tests for PostgresKeyValueStore with a mocked pool."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from psycopg.types.json import Jsonb

from yetki.infrastructure.persistence.postgres.key_value_store import PostgresKeyValueStore


def _pool_with(conn: AsyncMock) -> MagicMock:
    pool = MagicMock()
    pool.connection.return_value.__aenter__.return_value = conn
    pool.connection.return_value.__aexit__.return_value = None
    return pool


def _conn_returning(row) -> AsyncMock:
    cur = MagicMock()
    cur.fetchone = AsyncMock(return_value=row)
    conn = AsyncMock()
    conn.execute.return_value = cur
    conn.transaction = MagicMock()
    conn.transaction.return_value.__aenter__.return_value = None
    conn.transaction.return_value.__aexit__.return_value = None
    return conn


@pytest.mark.asyncio
async def test_get_returns_stored_value() -> None:
    """get selects by key and unwraps the jsonb column."""
    conn = _conn_returning(([{"user_id": "u-1"}],))
    store = PostgresKeyValueStore(_pool_with(conn))

    value = await store.get("user_overrides")

    assert value == [{"user_id": "u-1"}]
    query, params = conn.execute.call_args.args
    assert params == ("user_overrides",)
    assert "SELECT value FROM" in repr(query)
    assert "access_control_state" in repr(query)


@pytest.mark.asyncio
async def test_get_missing_key_returns_none() -> None:
    conn = _conn_returning(None)
    store = PostgresKeyValueStore(_pool_with(conn))

    assert await store.get("role_defaults") is None


@pytest.mark.asyncio
async def test_set_upserts_jsonb() -> None:
    """set writes the value wrapped in Jsonb and upserts on the key."""
    conn = _conn_returning(None)
    store = PostgresKeyValueStore(_pool_with(conn), table="acl_state")

    await store.set("pending_revocations", [{"request_id": "REQ1"}])

    query, params = conn.execute.call_args.args
    assert params[0] == "pending_revocations"
    assert isinstance(params[1], Jsonb)
    assert params[1].obj == [{"request_id": "REQ1"}]
    assert "ON CONFLICT (key) DO UPDATE" in repr(query)
    assert "acl_state" in repr(query)


@pytest.mark.asyncio
async def test_set_many_upserts_in_one_transaction() -> None:
    """set_many writes every key on one connection inside a transaction."""
    conn = _conn_returning(None)
    pool = _pool_with(conn)
    store = PostgresKeyValueStore(pool)

    await store.set_many({"user_overrides": [], "pending_revocations": [{"request_id": "REQ1"}]})

    assert pool.connection.call_count == 1
    conn.transaction.assert_called_once_with()
    keys = [c.args[1][0] for c in conn.execute.call_args_list]
    assert keys == ["user_overrides", "pending_revocations"]
    assert conn.execute.call_args_list[1].args[1][1].obj == [{"request_id": "REQ1"}]

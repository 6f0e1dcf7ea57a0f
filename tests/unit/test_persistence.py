"""Unit tests for the in-memory unit of work and its key-value persistence."""

import asyncio
from datetime import timedelta

import pytest

from yetki.domain.entities import AccessRequest, RoleDefaults, ScheduledRevocation, UserOverrides
from yetki.domain.exceptions import NotFoundError
from yetki.domain.value_objects import AccessType, DurationUnit, RequestStatus, UserRole
from yetki.infrastructure.persistence.memory import InMemoryAccessState, InMemoryKeyValueStore
from yetki.main import create_access_control


class YieldingStore(InMemoryKeyValueStore):
    """Store that suspends on every write, like a network-backed one."""

    async def set_many(self, items) -> None:
        await asyncio.sleep(0)
        await super().set_many(items)


class FailingStore(InMemoryKeyValueStore):
    """Store whose writes fail while any written key is in fail_on."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_on: set[str] = set()

    async def set_many(self, items) -> None:
        if self.fail_on & set(items):
            raise ConnectionError("store unavailable")
        await super().set_many(items)


@pytest.mark.asyncio
async def test_commit_writes_only_changed_collections(uow_factory, store, clock) -> None:
    async with uow_factory() as uow:
        await uow.overrides.save(
            UserOverrides(user_id="u-1", grants={"sales.view": True}, updated_at=clock.now())
        )

    assert store.keys() == ["user_overrides"]
    data = await store.get("user_overrides")
    assert data[0]["user_id"] == "u-1"
    assert data[0]["grants"] == {"sales.view": True}


@pytest.mark.asyncio
async def test_state_survives_reload(uow_factory, store, clock) -> None:
    now = clock.now()
    request = AccessRequest(
        id="REQ000000001",
        user_id="u-1",
        user_name="Deniz",
        permission_id="reports.export",
        permission_name="Export reports",
        access_type=AccessType.TEMPORARY,
        duration=2,
        duration_unit=DurationUnit.HOURS,
        requested_at=now,
    )
    request.approve("admin", now)
    async with uow_factory() as uow:
        await uow.role_defaults.replace(
            RoleDefaults(role=UserRole.SALES, grants={"sales.view": True}, updated_at=now)
        )
        await uow.access_requests.create(request)
        await uow.revocations.create(
            ScheduledRevocation(
                request_id=request.id,
                user_id="u-1",
                permission_id="reports.export",
                permission_name="Export reports",
                valid_until=request.valid_until,
            )
        )

    fresh = InMemoryAccessState()
    await fresh.load(store)

    defaults = await fresh.role_defaults.get(UserRole.SALES)
    assert dict(defaults.grants) == {"sales.view": True}
    restored = await fresh.access_requests.get_by_id(request.id)
    assert restored == request
    assert restored.valid_until == now + timedelta(hours=2)
    revocation = await fresh.revocations.get(request.id)
    assert revocation.valid_until == request.valid_until
    assert not fresh.dirty


@pytest.mark.asyncio
async def test_failure_rolls_back_uncommitted_changes(uow_factory, state, clock) -> None:
    async with uow_factory() as uow:
        await uow.overrides.save(
            UserOverrides(user_id="u-1", grants={"sales.view": True}, updated_at=clock.now())
        )

    with pytest.raises(RuntimeError):
        async with uow_factory() as uow:
            await uow.overrides.save(
                UserOverrides(user_id="u-1", grants={"sales.view": False}, updated_at=clock.now())
            )
            await uow.overrides.save(
                UserOverrides(user_id="u-2", grants={"orders.view": True}, updated_at=clock.now())
            )
            raise RuntimeError("boom")

    kept = await state.overrides.get("u-1")
    assert dict(kept.grants) == {"sales.view": True}
    assert await state.overrides.get("u-2") is None
    assert not state.dirty


@pytest.mark.asyncio
async def test_load_from_empty_store_clears_state(state, clock) -> None:
    await state.overrides.save(UserOverrides(user_id="u-1", grants={}, updated_at=clock.now()))
    await state.load(InMemoryKeyValueStore())
    assert await state.overrides.list_all() == []


@pytest.mark.asyncio
async def test_store_returns_copies() -> None:
    store = InMemoryKeyValueStore()
    value = [{"a": 1}]
    await store.set("k", value)
    value[0]["a"] = 2

    loaded = await store.get("k")
    assert loaded == [{"a": 1}]
    loaded.append({"b": 2})
    assert await store.get("k") == [{"a": 1}]
    assert await store.get("missing") is None


@pytest.mark.asyncio
async def test_access_request_repository_isolates_callers(uow_factory, clock) -> None:
    request = AccessRequest(
        id="REQ000000002",
        user_id="u-1",
        user_name="Deniz",
        permission_id="sales.view",
        permission_name="View sales",
        access_type=AccessType.PERMANENT,
        requested_at=clock.now(),
    )
    async with uow_factory() as uow:
        await uow.access_requests.create(request)

    request.note = "mutated outside"
    async with uow_factory() as uow:
        stored = await uow.access_requests.get_by_id(request.id)
    assert stored.note is None


@pytest.mark.asyncio
async def test_failure_while_another_commit_is_in_flight(
    settings, clock, scheduler, notifier, users, sales_user
) -> None:
    """A failing unit of work must not discard a concurrent one's pending writes."""
    store = YieldingStore()
    access_control = create_access_control(
        settings, clock=clock, scheduler=scheduler, notifier=notifier, users=users, store=store
    )
    request = await access_control.submit(sales_user, "reports.export", "temporary", 2, "hours")

    decided, missing = await asyncio.gather(
        access_control.decide(request.id, "approved", "admin"),
        access_control.decide("REQmissing", "approved", "admin"),
        return_exceptions=True,
    )

    assert decided.status is RequestStatus.APPROVED
    assert isinstance(missing, NotFoundError)
    stored = await access_control.list_requests.get(request.id)
    assert stored.status is RequestStatus.APPROVED
    assert [r.request_id for r in await access_control.state.revocations.list_all()] == [
        request.id
    ]
    assert [r["request_id"] for r in await store.get("pending_revocations")] == [request.id]
    assert (await store.get("access_requests"))[0]["status"] == "approved"


@pytest.mark.asyncio
async def test_store_failure_during_commit_keeps_memory_and_store_consistent(
    settings, clock, scheduler, notifier, users, sales_user
) -> None:
    store = FailingStore()
    access_control = create_access_control(
        settings, clock=clock, scheduler=scheduler, notifier=notifier, users=users, store=store
    )
    request = await access_control.submit(sales_user, "reports.export", "temporary", 2, "hours")
    emitted = len(notifier.emitted)

    store.fail_on = {"pending_revocations"}
    with pytest.raises(ConnectionError):
        await access_control.decide(request.id, "approved", "admin")

    stored = await access_control.list_requests.get(request.id)
    assert stored.status is RequestStatus.PENDING
    assert await access_control.state.revocations.list_all() == []
    assert await access_control.resolve(sales_user, "reports.export") is False
    assert await store.get("user_overrides") is None
    assert await store.get("pending_revocations") is None
    assert scheduler.pending_keys() == []
    assert len(notifier.emitted) == emitted

    store.fail_on = set()
    decided = await access_control.decide(request.id, "approved", "admin")
    assert decided.status is RequestStatus.APPROVED
    assert [r["request_id"] for r in await store.get("pending_revocations")] == [request.id]


@pytest.mark.asyncio
async def test_commit_writes_collections_in_one_call(uow_factory, store, clock) -> None:
    calls: list[list[str]] = []
    set_many = store.set_many

    async def recording_set_many(items) -> None:
        calls.append(sorted(items))
        await set_many(items)

    store.set_many = recording_set_many
    async with uow_factory() as uow:
        await uow.overrides.save(
            UserOverrides(user_id="u-1", grants={"sales.view": True}, updated_at=clock.now())
        )
        await uow.role_defaults.replace(RoleDefaults(role=UserRole.SALES, updated_at=clock.now()))
    async with uow_factory() as uow:
        await uow.overrides.get("u-1")

    assert calls == [["role_defaults", "user_overrides"]]

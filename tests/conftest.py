"""Pytest fixtures for yetki tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from yetki.application.ports import ScheduledAction
from yetki.config import Settings
from yetki.domain.entities import Notification, User
from yetki.domain.value_objects import UserRole
from yetki.infrastructure.identity.user_directory import InMemoryUserDirectory
from yetki.infrastructure.persistence.memory import (
    InMemoryAccessState,
    InMemoryKeyValueStore,
    create_uow_factory,
)
from yetki.main import AccessControl, create_access_control

T0 = datetime(2026, 10, 19, 9, 0, tzinfo=UTC)


# --- Fake collaborators ---


class FakeClock:
    """Settable clock."""

    def __init__(self, start: datetime = T0) -> None:
        self._now = start

    def now(self) -> datetime:
        return self._now

    def set(self, when: datetime) -> None:
        self._now = when

    def advance(self, delta: timedelta) -> None:
        self._now += delta


class FakeScheduler:
    """Deterministic scheduler - actions run only when the test advances time."""

    def __init__(self, clock: FakeClock) -> None:
        self._clock = clock
        self._jobs: dict[str, tuple[datetime, ScheduledAction]] = {}
        self.history: list[tuple[str, datetime]] = []

    def schedule_at(self, when: datetime, action: ScheduledAction, *, key: str) -> None:
        self._jobs[key] = (when, action)
        self.history.append((key, when))

    def cancel(self, key: str) -> bool:
        return self._jobs.pop(key, None) is not None

    def pending_keys(self) -> list[str]:
        return sorted(self._jobs)

    def when(self, key: str) -> datetime:
        return self._jobs[key][0]

    async def shutdown(self) -> None:
        self._jobs.clear()

    async def run_due(self) -> int:
        """Run every job due at the current clock time, earliest first."""
        now = self._clock.now()
        due = sorted((when, key) for key, (when, _) in self._jobs.items() if when <= now)
        for _, key in due:
            _, action = self._jobs.pop(key)
            await action()
        return len(due)

    async def advance_to(self, when: datetime) -> int:
        self._clock.set(when)
        return await self.run_due()

    async def advance(self, delta: timedelta) -> int:
        return await self.advance_to(self._clock.now() + delta)


class RecordingNotificationSink:
    """Collects emitted notifications in order."""

    def __init__(self) -> None:
        self.emitted: list[Notification] = []

    async def emit(self, notification: Notification) -> None:
        self.emitted.append(notification)

    def titles(self) -> list[str]:
        return [n.title for n in self.emitted]


# --- Fixtures ---


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> FakeScheduler:
    return FakeScheduler(clock)


@pytest.fixture
def notifier() -> RecordingNotificationSink:
    return RecordingNotificationSink()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def state() -> InMemoryAccessState:
    return InMemoryAccessState()


@pytest.fixture
def uow_factory(state, store):
    """UoW factory over shared in-memory state."""
    return create_uow_factory(state, store)


@pytest.fixture
def sales_user() -> User:
    return User(id="u-sales", name="Selin Sales", role=UserRole.SALES)


@pytest.fixture
def warehouse_user() -> User:
    return User(id="u-wh", name="Kemal Warehouse", role=UserRole.WAREHOUSE)


@pytest.fixture
def admin_user() -> User:
    return User(id="u-admin", name="Ayla Admin", role=UserRole.ADMIN)


@pytest.fixture
def users(sales_user, warehouse_user, admin_user) -> InMemoryUserDirectory:
    return InMemoryUserDirectory([sales_user, warehouse_user, admin_user])


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", recover_expirations_on_startup=True)


@pytest.fixture
def access_control(settings, clock, scheduler, notifier, users, store) -> AccessControl:
    """Fully wired AccessControl over fakes and the in-memory store."""
    return create_access_control(
        settings,
        clock=clock,
        scheduler=scheduler,
        notifier=notifier,
        users=users,
        store=store,
    )

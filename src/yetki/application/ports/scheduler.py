"""Scheduler port - deferred at-time actions."""

from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Protocol

ScheduledAction = Callable[[], Awaitable[object]]


class Scheduler(Protocol):
    """Runs an action once at a given time.

    Scheduling an existing key replaces the earlier action. A time already in
    the past runs the action as soon as possible.
    """

    def schedule_at(self, when: datetime, action: ScheduledAction, *, key: str) -> None: ...

    def cancel(self, key: str) -> bool: ...

    def pending_keys(self) -> list[str]: ...

    async def shutdown(self) -> None: ...

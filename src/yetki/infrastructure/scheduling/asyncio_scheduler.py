"""asyncio-based scheduler for deferred actions."""

import asyncio
import logging
from datetime import datetime

from yetki.application.ports import Clock, ScheduledAction
from yetki.infrastructure.clock import SystemClock

logger = logging.getLogger(__name__)


class AsyncioScheduler:
    """Runs each action once via loop.call_later on the running event loop.

    Delays are computed from the injected clock; a time in the past runs on
    the next loop iteration. Action failures are logged and swallowed.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self._handles: dict[str, asyncio.TimerHandle] = {}
        self._tasks: set[asyncio.Task] = set()

    def schedule_at(self, when: datetime, action: ScheduledAction, *, key: str) -> None:
        self.cancel(key)
        delay = max((when - self._clock.now()).total_seconds(), 0.0)
        loop = asyncio.get_running_loop()
        self._handles[key] = loop.call_later(delay, self._fire, key, action)
        logger.debug("Scheduled %s in %.1fs", key, delay)

    def cancel(self, key: str) -> bool:
        handle = self._handles.pop(key, None)
        if handle is None:
            return False
        handle.cancel()
        logger.debug("Cancelled %s", key)
        return True

    def pending_keys(self) -> list[str]:
        return sorted(self._handles)

    async def shutdown(self) -> None:
        """Cancel pending timers and running actions."""
        for handle in self._handles.values():
            handle.cancel()
        self._handles.clear()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    def _fire(self, key: str, action: ScheduledAction) -> None:
        self._handles.pop(key, None)
        task = asyncio.ensure_future(self._run(key, action))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, key: str, action: ScheduledAction) -> None:
        try:
            await action()
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Scheduled action failed: %s", key)

"""Notification sink port."""

from typing import Protocol

from yetki.domain.entities import Notification


class NotificationSink(Protocol):
    """Accepts notifications for delivery to users and approvers."""

    async def emit(self, notification: Notification) -> None: ...

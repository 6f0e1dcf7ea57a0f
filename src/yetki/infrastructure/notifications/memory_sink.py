"""In-memory notification outbox."""

from yetki.domain.entities import Notification


class InMemoryNotificationSink:
    """Keeps emitted notifications, newest first."""

    def __init__(self) -> None:
        self._items: list[Notification] = []

    @property
    def notifications(self) -> list[Notification]:
        return list(self._items)

    async def emit(self, notification: Notification) -> None:
        self._items.insert(0, notification)

    def for_user(self, user_id: str) -> list[Notification]:
        """Notifications visible to user_id: broadcasts plus the user's own."""
        return [
            n
            for n in self._items
            if n.recipient_user_id is None or n.recipient_user_id == user_id
        ]

    def for_approvers(self) -> list[Notification]:
        return [n for n in self._items if n.recipient_user_id is None]

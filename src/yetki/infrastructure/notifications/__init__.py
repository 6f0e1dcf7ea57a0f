"""Notification sinks."""

from yetki.infrastructure.notifications.logging_sink import LoggingNotificationSink
from yetki.infrastructure.notifications.memory_sink import InMemoryNotificationSink

__all__ = ["InMemoryNotificationSink", "LoggingNotificationSink"]

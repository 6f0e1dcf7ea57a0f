"""Application ports - interfaces for external adapters."""

from yetki.application.ports.clock import Clock
from yetki.application.ports.key_value_store import KeyValueStore
from yetki.application.ports.notification_sink import NotificationSink
from yetki.application.ports.scheduler import ScheduledAction, Scheduler
from yetki.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory
from yetki.application.ports.user_directory import UserDirectory

__all__ = [
    "Clock",
    "KeyValueStore",
    "NotificationSink",
    "ScheduledAction",
    "Scheduler",
    "UnitOfWork",
    "UnitOfWorkFactory",
    "UserDirectory",
]

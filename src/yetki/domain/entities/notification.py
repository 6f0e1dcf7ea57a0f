"""Notification entity handed to the notification sink."""

import secrets
import string
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from yetki.domain.value_objects import NotificationType

_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_notification_id() -> str:
    return "NOTIF" + "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))


@dataclass(frozen=True)
class Notification:
    """Notification - recipient_user_id None addresses approvers."""

    type: NotificationType
    title: str
    message: str
    timestamp: datetime
    recipient_user_id: str | None = None
    payload: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=new_notification_id)

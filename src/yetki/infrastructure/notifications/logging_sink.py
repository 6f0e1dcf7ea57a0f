"""Notification sink that writes notifications to the log."""

import logging

from yetki.domain.entities import Notification

logger = logging.getLogger(__name__)


class LoggingNotificationSink:
    """Logs each notification at INFO."""

    async def emit(self, notification: Notification) -> None:
        logger.info(
            "[%s] %s -> %s: %s",
            notification.type.value,
            notification.title,
            notification.recipient_user_id or "approvers",
            notification.message,
        )

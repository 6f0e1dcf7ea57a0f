"""Notification types."""

from enum import StrEnum


class NotificationType(StrEnum):
    ACCESS_REQUEST = "access_request"
    SYSTEM = "system"

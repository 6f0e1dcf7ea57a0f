"""Scheduled revocation - durable record of a pending temporary-access expiry."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ScheduledRevocation:
    """Revoke user_id's grant of permission_id at valid_until."""

    request_id: str
    user_id: str
    permission_id: str
    permission_name: str
    valid_until: datetime

"""Access request entity - a user's ask for a permission."""

import secrets
import string
from dataclasses import dataclass
from datetime import datetime

from yetki.domain.exceptions import InvalidStateError
from yetki.domain.value_objects import AccessType, DurationUnit, RequestStatus

_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_request_id() -> str:
    """Generate a request id such as ``REQk3j9x0a2b``."""
    return "REQ" + "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))


@dataclass
class AccessRequest:
    """Access request - pending until approved or rejected, exactly once."""

    id: str
    user_id: str
    user_name: str
    permission_id: str
    permission_name: str
    access_type: AccessType
    requested_at: datetime
    status: RequestStatus = RequestStatus.PENDING
    duration: int | None = None
    duration_unit: DurationUnit | None = None
    responded_at: datetime | None = None
    responded_by: str | None = None
    valid_until: datetime | None = None
    note: str | None = None

    @property
    def is_temporary(self) -> bool:
        return self.access_type is AccessType.TEMPORARY

    def approve(self, responder: str, responded_at: datetime) -> None:
        """Move to approved. Temporary requests get valid_until."""
        self._ensure_pending()
        self.status = RequestStatus.APPROVED
        self.responded_at = responded_at
        self.responded_by = responder
        if self.is_temporary:
            self.valid_until = responded_at + self.duration_unit.to_timedelta(self.duration)

    def reject(self, responder: str, responded_at: datetime) -> None:
        """Move to rejected."""
        self._ensure_pending()
        self.status = RequestStatus.REJECTED
        self.responded_at = responded_at
        self.responded_by = responder

    def _ensure_pending(self) -> None:
        if self.status.is_terminal:
            raise InvalidStateError(
                f"Access request {self.id} is already {self.status.value}"
            )

"""Access request statuses and decisions."""

from enum import StrEnum


class RequestStatus(StrEnum):
    """Lifecycle status of an access request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not RequestStatus.PENDING


class Decision(StrEnum):
    """Approver decision on a pending request."""

    APPROVED = "approved"
    REJECTED = "rejected"

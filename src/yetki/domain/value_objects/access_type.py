"""Access request types."""

from enum import StrEnum


class AccessType(StrEnum):
    """How long an approved access request stays in effect."""

    PERMANENT = "permanent"
    TEMPORARY = "temporary"

"""Duration units for temporary access."""

from datetime import timedelta
from enum import StrEnum


class DurationUnit(StrEnum):
    """Unit of a temporary access duration."""

    HOURS = "hours"
    DAYS = "days"

    def to_timedelta(self, duration: int) -> timedelta:
        """Convert a duration in this unit to a timedelta."""
        if self is DurationUnit.HOURS:
            return timedelta(hours=duration)
        return timedelta(days=duration)

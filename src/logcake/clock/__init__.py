"""Clock module for Log Cake.

Provides the current instant and calendar-day arithmetic used by the
tracking core. Day boundaries are local midnight.
"""

from datetime import datetime
from typing import Protocol

from .mock import ManualClock
from .system import SystemClock


class Clock(Protocol):
    """Interface for time sources.

    Implementations return timezone-aware local datetimes.
    """

    def now(self) -> datetime:
        """Return the current instant."""
        ...

    def start_of_day(self, instant: datetime) -> datetime:
        """Return local midnight of the day containing ``instant``."""
        ...


def is_same_day(first: datetime, second: datetime, clock: Clock) -> bool:
    """Check whether two instants fall on the same calendar day."""
    return clock.start_of_day(first) == clock.start_of_day(second)


__all__ = [
    "Clock",
    "ManualClock",
    "SystemClock",
    "is_same_day",
]

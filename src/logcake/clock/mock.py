"""Mock clock for testing.

Provides a controllable time source for unit and integration testing.
"""

from datetime import UTC, datetime, timedelta, tzinfo


class ManualClock:
    """Clock that only moves when told to.

    Day boundaries are computed in the clock's own timezone (UTC unless
    given), which keeps tests independent of the host timezone.
    """

    def __init__(self, start: datetime | None = None, tz: tzinfo = UTC) -> None:
        """Initialize manual clock.

        Args:
            start: Initial instant. Naive values are taken to be in ``tz``.
                   Defaults to 2024-01-15 09:00 in ``tz``.
            tz: Timezone used for day boundaries
        """
        self._tz = tz
        self._now = self._coerce(start or datetime(2024, 1, 15, 9, 0, 0))
        self._calls = 0

    def _coerce(self, instant: datetime) -> datetime:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=self._tz)
        return instant.astimezone(self._tz)

    def now(self) -> datetime:
        self._calls += 1
        return self._now

    def start_of_day(self, instant: datetime) -> datetime:
        local = self._coerce(instant)
        return local.replace(hour=0, minute=0, second=0, microsecond=0)

    def set(self, instant: datetime) -> None:
        """Jump to an absolute instant."""
        self._now = self._coerce(instant)

    def advance(self, **kwargs: float) -> datetime:
        """Move forward by a timedelta given as keyword arguments.

        Example:
            >>> clock.advance(hours=1, minutes=30)
        """
        self._now = self._now + timedelta(**kwargs)
        return self._now

    @property
    def call_count(self) -> int:
        """Number of times now() has been read."""
        return self._calls


__all__ = ["ManualClock"]

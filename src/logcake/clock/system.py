"""Wall-clock time source."""

from datetime import datetime


def local_start_of_day(instant: datetime) -> datetime:
    """Return local midnight of the day containing ``instant``.

    Naive datetimes are taken to be local time already.
    """
    local = instant.astimezone()
    midnight = local.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)
    # Re-resolve the offset; it differs from the instant's on DST change days
    return midnight.astimezone()


class SystemClock:
    """Clock backed by the operating system's local time.

    Microseconds are dropped so that instants survive a round trip
    through the whole-second ISO-8601 files unchanged.
    """

    def now(self) -> datetime:
        return datetime.now().astimezone().replace(microsecond=0)

    def start_of_day(self, instant: datetime) -> datetime:
        return local_start_of_day(instant)


__all__ = ["SystemClock", "local_start_of_day"]

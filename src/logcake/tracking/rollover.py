"""Day-boundary rollover.

Closes out the previous calendar day when the wall clock passes midnight.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from logcake.clock import Clock

from .models import CurrentTrackingState, TimeEntry
from .session import SessionController

if TYPE_CHECKING:
    from logcake.export import SummaryExporter
    from logcake.storage import EntryStore

logger = logging.getLogger(__name__)


@dataclass
class RolloverResult:
    """Outcome of a day change."""

    previous_day: datetime
    new_day: datetime
    exported: list[TimeEntry]  # Entries closed out with the previous day
    report_path: Path | None
    restarted: CurrentTrackingState | None  # Session carried across midnight


class DayBoundaryMonitor:
    """Detects day changes and rolls the entry store over.

    A session running across midnight is split at the start of the new
    day: the first part is exported with the previous day, the second
    continues as a fresh session in the same category.
    """

    def __init__(
        self,
        entry_store: "EntryStore",
        controller: SessionController,
        exporter: "SummaryExporter",
        clock: Clock,
    ) -> None:
        self._entries = entry_store
        self._controller = controller
        self._exporter = exporter
        self._clock = clock

    def check(self, now: datetime | None = None) -> RolloverResult | None:
        """Roll over if ``now`` is on a later day than the tracked one.

        Returns:
            RolloverResult if a rollover happened, None otherwise
        """
        now = now or self._clock.now()
        new_day = self._clock.start_of_day(now)
        previous_day = self._entries.current_day

        if new_day <= previous_day:
            return None

        return self._roll_over(previous_day, new_day)

    def _roll_over(self, previous_day: datetime, new_day: datetime) -> RolloverResult:
        logger.info(f"Day changed from {previous_day.date()} to {new_day.date()}")

        # Clip the running session at midnight so its first half is
        # attributed to the day being closed
        carried = self._controller.state
        if carried is not None and carried.start_time < new_day:
            self._controller.stop(end_time=new_day)
        else:
            carried = None

        stale = self._entries.remove_where(lambda e: self._entries.day_of(e) < new_day)
        _, report_path = self._exporter.export(stale, day=previous_day)

        self._entries.set_current_day(new_day)

        restarted = None
        if carried is not None:
            restarted = self._controller.start(carried.category, start_time=new_day)
            logger.info(f"Restarted tracking for new day: {carried.category}")

        self._entries.save()

        return RolloverResult(
            previous_day=previous_day,
            new_day=new_day,
            exported=stale,
            report_path=report_path,
            restarted=restarted,
        )


__all__ = ["DayBoundaryMonitor", "RolloverResult"]

"""Periodic job scheduling.

Runs tick handlers on one thread. Jobs are polled with ``run_pending``,
so tests can drive time explicitly and the main loop only needs to call
it repeatedly.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from logcake.clock import Clock

logger = logging.getLogger(__name__)


@dataclass
class Job:
    """A repeating tick handler.

    Attributes:
        name: Label used in logs
        interval_seconds: Time between runs
        callback: Called with the tick instant
        next_run: When the job is next due
        run_count: Completed runs, including ones that raised
    """

    name: str
    interval_seconds: float
    callback: Callable[[datetime], None]
    next_run: datetime
    run_count: int = field(default=0)

    def is_due(self, now: datetime) -> bool:
        return now >= self.next_run


class Scheduler:
    """Single-threaded scheduler for repeating jobs."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._jobs: list[Job] = []

    def every(
        self,
        seconds: float,
        callback: Callable[[datetime], None],
        name: str | None = None,
    ) -> Job:
        """Schedule ``callback`` to run every ``seconds``.

        The first run is one interval from now.

        Raises:
            ValueError: If ``seconds`` is not positive
        """
        if seconds <= 0:
            raise ValueError(f"Interval must be positive, got {seconds}")

        job = Job(
            name=name or getattr(callback, "__name__", "job"),
            interval_seconds=seconds,
            callback=callback,
            next_run=self._clock.now() + timedelta(seconds=seconds),
        )
        self._jobs.append(job)
        logger.debug(f"Scheduled '{job.name}' every {seconds}s")
        return job

    def cancel(self, job: Job | None) -> bool:
        """Remove a job.

        Returns:
            True if the job was scheduled, False otherwise
        """
        if job is None or job not in self._jobs:
            return False
        self._jobs.remove(job)
        logger.debug(f"Cancelled '{job.name}'")
        return True

    def clear(self) -> None:
        self._jobs.clear()

    @property
    def jobs(self) -> list[Job]:
        return list(self._jobs)

    def run_pending(self, now: datetime | None = None) -> int:
        """Run every due job once.

        Missed intervals are not replayed; a late job runs once and is
        rescheduled from ``now``. A job that raises is logged and stays
        scheduled.

        Returns:
            Number of jobs run
        """
        now = now or self._clock.now()
        ran = 0

        # Callbacks may schedule or cancel jobs
        for job in list(self._jobs):
            if job not in self._jobs or not job.is_due(now):
                continue

            job.next_run = now + timedelta(seconds=job.interval_seconds)
            job.run_count += 1
            ran += 1
            try:
                job.callback(now)
            except Exception:
                logger.exception(f"Error in scheduled job '{job.name}'")

        return ran

    def run_forever(
        self,
        should_stop: Callable[[], bool],
        poll_interval: float = 0.5,
    ) -> None:
        """Poll jobs until ``should_stop`` returns True."""
        logger.info("Scheduler loop started")
        while not should_stop():
            self.run_pending()
            time.sleep(poll_interval)
        logger.info("Scheduler loop stopped")


__all__ = ["Job", "Scheduler"]

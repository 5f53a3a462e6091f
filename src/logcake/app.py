"""Application shell for Log Cake.

Wires the tracking core together and exposes the inbound events the
platform layer delivers: menu actions, timer ticks, sleep and termination.
"""

import logging
from datetime import datetime
from pathlib import Path

from .clock import Clock, SystemClock
from .config import AppConfig, ScheduleConfig
from .export import SummaryExporter
from .presentation import LoggingPresenter, Presenter
from .scheduler import Job, Scheduler
from .storage import EntryStore, SessionStore
from .tracking import (
    CategorySet,
    CurrentTrackingState,
    DayBoundaryMonitor,
    RolloverResult,
    SessionController,
    TimeEntry,
    ToggleResult,
)

logger = logging.getLogger(__name__)


class TimeTrackerApp:
    """Menu bar time tracker.

    All handlers are expected to run on one thread; the platform layer
    serializes menu actions, ticks and system notifications.
    """

    def __init__(
        self,
        entry_store: EntryStore,
        session_store: SessionStore,
        exporter: SummaryExporter,
        presenter: Presenter,
        clock: Clock,
        categories: CategorySet | None = None,
        schedule: ScheduleConfig | None = None,
    ) -> None:
        """Initialize the application.

        Args:
            entry_store: Completed entries of the current day
            session_store: Crash-recovery file for the active session
            exporter: Daily report and JSON writer
            presenter: Menu bar presentation layer
            clock: Time source
            categories: Configured categories (defaults to the built-in set)
            schedule: Tick intervals (defaults to ScheduleConfig())
        """
        self._entries = entry_store
        self._sessions = session_store
        self._exporter = exporter
        self._presenter = presenter
        self._clock = clock
        self._categories = categories or CategorySet()
        self._schedule = schedule or ScheduleConfig()

        self._scheduler = Scheduler(clock)
        self._controller = SessionController(
            categories=self._categories,
            entry_store=entry_store,
            session_store=session_store,
            clock=clock,
            on_change=self._on_session_change,
        )
        self._monitor = DayBoundaryMonitor(
            entry_store=entry_store,
            controller=self._controller,
            exporter=exporter,
            clock=clock,
        )
        self._live_job: Job | None = None
        self._launched = False

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        presenter: Presenter | None = None,
        clock: Clock | None = None,
    ) -> "TimeTrackerApp":
        """Build the application from configuration.

        Args:
            config: Loaded configuration
            presenter: Presentation layer (defaults to LoggingPresenter)
            clock: Time source (defaults to SystemClock)
        """
        clock = clock or SystemClock()
        data_dir = config.resolve_data_dir()
        report_dir = config.resolve_report_dir()
        categories = CategorySet()

        logger.info(f"Data directory: {data_dir}")
        logger.info(f"Report directory: {report_dir}")

        return cls(
            entry_store=EntryStore(data_dir / config.storage.entries_file, clock),
            session_store=SessionStore(data_dir / config.storage.session_file, clock),
            exporter=SummaryExporter(
                categories=categories,
                report_dir=report_dir,
                json_path=report_dir / config.storage.json_export_file,
            ),
            presenter=presenter or LoggingPresenter(),
            clock=clock,
            categories=categories,
            schedule=config.schedule,
        )

    @property
    def controller(self) -> SessionController:
        return self._controller

    @property
    def entry_store(self) -> EntryStore:
        return self._entries

    @property
    def session_store(self) -> SessionStore:
        return self._sessions

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def categories(self) -> CategorySet:
        return self._categories

    @property
    def state(self) -> CurrentTrackingState | None:
        return self._controller.state

    def launch(self) -> None:
        """Load persisted data, recover any session and start the timers."""
        if self._launched:
            logger.warning("Application already launched")
            return

        self._entries.load()

        recovered = self._sessions.load()
        if recovered is not None:
            self._controller.restore(recovered)
        else:
            self._on_session_change(None)

        self._scheduler.every(self._schedule.autosave_interval, self._autosave, name="autosave")
        self._scheduler.every(
            self._schedule.day_check_interval, self._check_day, name="day-boundary"
        )
        self._launched = True
        logger.info(f"Launched with {len(self._entries)} entries for today")

    def toggle(self, category: str) -> ToggleResult:
        """Menu action: toggle tracking of ``category``."""
        return self._controller.toggle(category)

    def stop(self) -> TimeEntry | None:
        """Menu action: stop tracking."""
        return self._controller.stop()

    def export_requested(self, as_json: bool = False) -> Path | None:
        """Menu action: export today's summary.

        The running session is included up to now without being recorded.

        Args:
            as_json: Write the completed entries as JSON instead

        Returns:
            Path written, or None if the export failed
        """
        if as_json:
            path = self._exporter.write_json(self._entries.all())
        else:
            _, path = self._exporter.export(
                self._entries_with_live(self._clock.now()),
                day=self._entries.current_day,
            )

        if path is not None:
            self._presenter.show_report(path)
        return path

    def system_sleeping(self) -> TimeEntry | None:
        """System notification: the machine is about to sleep."""
        if not self._controller.is_active:
            return None
        logger.info("Computer going to sleep - stopping time tracking")
        return self._controller.stop()

    def application_terminating(self) -> None:
        """System notification: the application is quitting.

        The session file is kept so a relaunch on the same day resumes
        tracking.
        """
        self._entries.save()
        self._sessions.save(self._controller.state)
        self._scheduler.clear()
        self._live_job = None
        self._launched = False
        logger.info("Saved state for shutdown")

    def tick(self, now: datetime | None = None) -> int:
        """Run due periodic jobs."""
        return self._scheduler.run_pending(now)

    def check_day_boundary(self, now: datetime | None = None) -> RolloverResult | None:
        return self._monitor.check(now)

    def _entries_with_live(self, now: datetime) -> list[TimeEntry]:
        entries = self._entries.all()
        state = self._controller.state
        if state is not None:
            entries.append(state.as_entry(now))
        return entries

    def _autosave(self, now: datetime) -> None:
        self._sessions.save(self._controller.state)
        if self._schedule.autosave_report:
            self._exporter.export(self._entries_with_live(now), day=self._entries.current_day)

    def _check_day(self, now: datetime) -> None:
        self._monitor.check(now)

    def _live_tick(self, now: datetime) -> None:
        state = self._controller.state
        if state is not None:
            self._presenter.update_elapsed(state.category, state.elapsed_seconds(now))

    def _on_session_change(self, state: CurrentTrackingState | None) -> None:
        if state is not None and self._live_job is None:
            self._live_job = self._scheduler.every(
                self._schedule.live_update_interval, self._live_tick, name="live-update"
            )
        elif state is None and self._live_job is not None:
            self._scheduler.cancel(self._live_job)
            self._live_job = None

        self._presenter.refresh(state)


__all__ = ["TimeTrackerApp"]

"""Session controller for time tracking.

Provides the start/stop/toggle state machine for the single active session.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from logcake.clock import Clock

from .models import CategorySet, CurrentTrackingState, TimeEntry

if TYPE_CHECKING:
    from logcake.storage import EntryStore, SessionStore

logger = logging.getLogger(__name__)


@dataclass
class ToggleResult:
    """Result of toggling a category."""

    stopped: TimeEntry | None  # Entry closed by this toggle, if any
    started: CurrentTrackingState | None  # Session opened by this toggle, if any


class SessionController:
    """Tracks the single active session.

    Enforces the at-most-one-session constraint. Every transition is
    persisted immediately and reported through ``on_change``.
    """

    def __init__(
        self,
        categories: CategorySet,
        entry_store: "EntryStore",
        session_store: "SessionStore",
        clock: Clock,
        on_change: Callable[[CurrentTrackingState | None], None] | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            categories: Configured categories
            entry_store: Receives an entry whenever a session stops
            session_store: Mirrors the active session for crash recovery
            clock: Time source
            on_change: Optional callback after every start and stop
        """
        self._categories = categories
        self._entries = entry_store
        self._sessions = session_store
        self._clock = clock
        self._on_change = on_change
        self._state: CurrentTrackingState | None = None

    @property
    def state(self) -> CurrentTrackingState | None:
        """The active session, or None when idle."""
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is not None

    def start(self, category: str, start_time: datetime | None = None) -> CurrentTrackingState | None:
        """Start tracking ``category``.

        Does nothing while another session is active; callers stop first.

        Args:
            category: Configured category name
            start_time: Defaults to now

        Returns:
            The new session, or None if a session was already active

        Raises:
            ValueError: If ``category`` is not configured
        """
        self._require_category(category)

        if self._state is not None:
            logger.debug(
                f"Ignoring start of '{category}': '{self._state.category}' is already active"
            )
            return None

        self._state = CurrentTrackingState(
            category=category,
            start_time=start_time or self._clock.now(),
        )
        self._sessions.save(self._state)

        logger.info(f"Started tracking '{category}'")
        self._notify()
        return self._state

    def stop(self, end_time: datetime | None = None) -> TimeEntry | None:
        """Stop the active session and record it.

        Args:
            end_time: Defaults to now; clamped to the session start

        Returns:
            The recorded entry, or None if nothing was active
        """
        if self._state is None:
            logger.debug("Ignoring stop: no active session")
            return None

        state = self._state
        entry = state.as_entry(end_time or self._clock.now())

        self._entries.append(entry)
        self._state = None
        self._entries.save()
        self._sessions.save(None)

        logger.info(f"Stopped tracking '{entry.category}' ({entry.duration_seconds}s)")
        self._notify()
        return entry

    def toggle(self, category: str) -> ToggleResult:
        """Toggle ``category`` on or off.

        Any active session is stopped first. The requested category is then
        started unless it is the one that was just stopped.

        Raises:
            ValueError: If ``category`` is not configured
        """
        self._require_category(category)

        previous = self._state.category if self._state else None
        stopped = self.stop()

        if previous == category:
            return ToggleResult(stopped=stopped, started=None)

        started = self.start(category)
        return ToggleResult(stopped=stopped, started=started)

    def restore(self, state: CurrentTrackingState) -> None:
        """Install a session recovered at launch.

        The session file already holds ``state`` and is not rewritten.
        """
        if self._state is not None:
            logger.warning(
                f"Not restoring '{state.category}': '{self._state.category}' is already active"
            )
            return
        if state.category not in self._categories:
            logger.warning(f"Restoring session for unconfigured category '{state.category}'")

        self._state = state
        self._notify()

    def _require_category(self, category: str) -> None:
        if category not in self._categories:
            raise ValueError(f"Unknown category: {category!r}")

    def _notify(self) -> None:
        if self._on_change:
            self._on_change(self._state)


__all__ = ["SessionController", "ToggleResult"]

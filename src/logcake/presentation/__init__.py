"""Presentation boundary for Log Cake.

The menu bar item, its menu and the live elapsed-time label live outside
the tracking core. The core talks to them only through this interface.
"""

from pathlib import Path
from typing import Protocol

from logcake.tracking.models import CurrentTrackingState

from .console import LoggingPresenter
from .mock import MockPresenter


class Presenter(Protocol):
    """Interface for the menu bar presentation layer.

    Implementations render tracking state; they never mutate it.
    """

    def refresh(self, state: CurrentTrackingState | None) -> None:
        """Redraw the menu and status icon after a transition.

        Args:
            state: Active session, or None when idle
        """
        ...

    def update_elapsed(self, category: str, elapsed_seconds: int) -> None:
        """Update the live elapsed-time label (called every second while active)."""
        ...

    def show_report(self, path: Path) -> None:
        """Reveal a report the user asked to export."""
        ...


__all__ = [
    "LoggingPresenter",
    "MockPresenter",
    "Presenter",
]

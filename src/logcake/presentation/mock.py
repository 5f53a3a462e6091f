"""Mock presenter for testing.

Records every call so tests can assert on what the UI would have shown.
"""

from pathlib import Path

from logcake.tracking.models import CurrentTrackingState


class MockPresenter:
    """Presenter that records calls instead of drawing."""

    def __init__(self) -> None:
        self.refreshes: list[CurrentTrackingState | None] = []
        self.elapsed_updates: list[tuple[str, int]] = []
        self.shown_reports: list[Path] = []

    def refresh(self, state: CurrentTrackingState | None) -> None:
        self.refreshes.append(state)

    def update_elapsed(self, category: str, elapsed_seconds: int) -> None:
        self.elapsed_updates.append((category, elapsed_seconds))

    def show_report(self, path: Path) -> None:
        self.shown_reports.append(path)

    @property
    def last_state(self) -> CurrentTrackingState | None:
        """State passed to the most recent refresh."""
        return self.refreshes[-1] if self.refreshes else None

    def reset(self) -> None:
        self.refreshes.clear()
        self.elapsed_updates.clear()
        self.shown_reports.clear()


__all__ = ["MockPresenter"]

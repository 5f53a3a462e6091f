"""Headless presenter that reports state changes through logging."""

import logging
from pathlib import Path

from logcake.export.summary import format_duration
from logcake.tracking.models import CurrentTrackingState

logger = logging.getLogger(__name__)


class LoggingPresenter:
    """Presenter for running without a menu bar.

    State changes are logged at INFO; the per-second elapsed label only at
    DEBUG, once per ``elapsed_log_every`` seconds.
    """

    def __init__(self, elapsed_log_every: int = 60) -> None:
        self._elapsed_log_every = max(1, elapsed_log_every)

    def refresh(self, state: CurrentTrackingState | None) -> None:
        if state is None:
            logger.info("Not tracking")
        else:
            logger.info(f"Currently tracking: {state.category} since {state.start_time:%H:%M:%S}")

    def update_elapsed(self, category: str, elapsed_seconds: int) -> None:
        if elapsed_seconds % self._elapsed_log_every == 0:
            logger.debug(f"Currently tracking: {category} {format_duration(elapsed_seconds)}")

    def show_report(self, path: Path) -> None:
        logger.info(f"Report available at {path}")


__all__ = ["LoggingPresenter"]

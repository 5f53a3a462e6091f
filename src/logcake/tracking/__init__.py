"""Tracking module for Log Cake.

Provides the session state machine and day rollover.
"""

from .models import (
    DEFAULT_CATEGORIES,
    Category,
    CategorySet,
    CurrentTrackingState,
    TimeEntry,
)
from .session import SessionController, ToggleResult
from .rollover import DayBoundaryMonitor, RolloverResult

__all__ = [
    "DEFAULT_CATEGORIES",
    "Category",
    "CategorySet",
    "CurrentTrackingState",
    "DayBoundaryMonitor",
    "RolloverResult",
    "SessionController",
    "TimeEntry",
    "ToggleResult",
]

"""Log Cake - menu bar time tracker.

Log Cake records how the day is spent across a small fixed set of
categories:
- One active tracking session at a time, toggled from the menu
- Completed entries persisted as JSON, trimmed to the current day
- Crash recovery of the in-progress session
- Midnight rollover that splits running sessions and exports the day
- Plain text daily summaries with total active time

Usage:
    python -m logcake --profile prod
    python -m logcake --config config/dev.yaml
"""

__version__ = "0.1.0"
__author__ = "Log Cake Developers"

from .config import AppConfig
from .config.loader import load_config

__all__ = [
    "AppConfig",
    "__version__",
    "load_config",
]

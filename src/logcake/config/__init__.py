"""Configuration module for Log Cake.

This module provides configuration loading and profile management.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class StorageConfig:
    """Locations of the persisted files.

    An empty ``data_dir`` or ``report_dir`` resolves to the platform's
    documents folder (see ``profiles.default_data_dir``).
    """

    data_dir: str = ""
    report_dir: str = ""
    entries_file: str = "timeEntries.json"
    session_file: str = "currentTracking.json"
    json_export_file: str = "timeEntries-export.json"


@dataclass
class ScheduleConfig:
    """Periodic job intervals, in seconds."""

    autosave_interval: float = 60.0
    day_check_interval: float = 60.0
    live_update_interval: float = 1.0
    autosave_report: bool = True
    poll_interval: float = 0.5


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class AppConfig:
    """Main Log Cake configuration."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def resolve_data_dir(self) -> Path:
        """Directory holding the entries and session files."""
        from .profiles import default_data_dir

        if self.storage.data_dir:
            return Path(self.storage.data_dir).expanduser()
        return default_data_dir()

    def resolve_report_dir(self) -> Path:
        """Directory receiving daily reports and JSON exports."""
        if self.storage.report_dir:
            return Path(self.storage.report_dir).expanduser()
        return self.resolve_data_dir()


__all__ = [
    "AppConfig",
    "LoggingConfig",
    "ScheduleConfig",
    "StorageConfig",
]

"""Completed entry storage.

Keeps the current day's completed entries in memory and mirrors them to a
JSON file that is rewritten wholesale on every save.
"""

import json
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from logcake.clock import Clock
from logcake.tracking.models import TimeEntry

from .codec import decode_entries, read_json, write_entries

logger = logging.getLogger(__name__)


class EntryStore:
    """Ordered collection of one day's completed entries.

    An entry belongs to the day its start time falls on. The store only
    ever holds entries of ``current_day``; older ones are dropped on load
    and pruned by rollover.
    """

    def __init__(self, path: Path | str, clock: Clock) -> None:
        """Initialize entry store.

        Args:
            path: JSON file holding the persisted entries
            clock: Time source for the tracked day
        """
        self._path = Path(path)
        self._clock = clock
        self._entries: list[TimeEntry] = []
        self._current_day = clock.start_of_day(clock.now())

    @property
    def path(self) -> Path:
        return self._path

    @property
    def current_day(self) -> datetime:
        """Start of the calendar day this store is tracking."""
        return self._current_day

    def set_current_day(self, day: datetime) -> None:
        self._current_day = self._clock.start_of_day(day)

    def day_of(self, entry: TimeEntry) -> datetime:
        """Calendar day an entry is attributed to."""
        return self._clock.start_of_day(entry.start_time)

    def append(self, entry: TimeEntry) -> None:
        self._entries.append(entry)

    def all(self) -> list[TimeEntry]:
        """Return a copy of the stored entries in insertion order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def remove_where(self, predicate: Callable[[TimeEntry], bool]) -> list[TimeEntry]:
        """Remove every entry matching ``predicate``.

        Returns:
            The removed entries, in their original order
        """
        removed = [e for e in self._entries if predicate(e)]
        if removed:
            self._entries = [e for e in self._entries if not predicate(e)]
        return removed

    def load(self) -> int:
        """Replace the in-memory set with today's entries from disk.

        Entries from earlier days are discarded, so the file trims itself
        even when rollover never ran (e.g. the app was closed at midnight).
        Read failures leave the store empty.

        Returns:
            Number of entries loaded
        """
        today = self._clock.start_of_day(self._clock.now())
        self._current_day = today
        self._entries = []

        if not self._path.exists():
            logger.debug(f"No entries file at {self._path}, starting empty")
            return 0

        try:
            loaded = decode_entries(read_json(self._path))
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in entries file {self._path}: {e}")
            return 0
        except ValueError as e:
            logger.error(f"Unreadable entries file {self._path}: {e}")
            return 0
        except OSError as e:
            logger.error(f"Failed to read entries from {self._path}: {e}")
            return 0

        self._entries = [e for e in loaded if self.day_of(e) == today]
        dropped = len(loaded) - len(self._entries)
        if dropped:
            logger.info(f"Discarded {dropped} entries from previous days")

        logger.info(f"Loaded {len(self._entries)} entries from {self._path}")
        return len(self._entries)

    def save(self) -> bool:
        """Overwrite the entries file with the in-memory set.

        Returns:
            True if saved successfully, False otherwise
        """
        try:
            write_entries(self._path, self._entries)
        except (OSError, TypeError) as e:
            logger.error(f"Failed to save entries to {self._path}: {e}")
            return False

        logger.debug(f"Saved {len(self._entries)} entries to {self._path}")
        return True


__all__ = ["EntryStore"]

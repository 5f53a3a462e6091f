"""Crash recovery for the in-progress session.

The active session is mirrored to its own small JSON file. The file exists
only while a session is active, so after an unclean shutdown its presence
tells the next launch what was being tracked.
"""

import json
import logging
from pathlib import Path

from logcake.clock import Clock, is_same_day
from logcake.tracking.models import CurrentTrackingState

from .codec import read_json, write_json

logger = logging.getLogger(__name__)


class SessionStore:
    """Persists and recovers the current tracking state."""

    def __init__(self, path: Path | str, clock: Clock) -> None:
        """Initialize session store.

        Args:
            path: JSON file for the active session
            clock: Time source used to reject stale sessions
        """
        self._path = Path(path)
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def save(self, state: CurrentTrackingState | None) -> bool:
        """Mirror ``state`` to disk, or delete the file when None.

        Returns:
            True if the file now reflects ``state``, False otherwise
        """
        if state is None:
            return self._remove()

        try:
            write_json(self._path, state.to_dict())
        except (OSError, TypeError) as e:
            logger.error(f"Failed to save tracking state to {self._path}: {e}")
            return False

        logger.debug(f"Saved tracking state: {state.category} since {state.start_time}")
        return True

    def load(self) -> CurrentTrackingState | None:
        """Recover a session left behind by the previous run.

        A session that started on an earlier calendar day is abandoned:
        the file is removed and nothing is restored.

        Returns:
            The recovered state, or None
        """
        if not self._path.exists():
            return None

        try:
            state = CurrentTrackingState.from_dict(read_json(self._path))
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in tracking state file {self._path}: {e}")
            return None
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed tracking state in {self._path}: {e}")
            return None
        except OSError as e:
            logger.error(f"Failed to read tracking state from {self._path}: {e}")
            return None

        if not is_same_day(state.start_time, self._clock.now(), self._clock):
            logger.info(
                f"Discarding stale session '{state.category}' started {state.start_time}"
            )
            self._remove()
            return None

        logger.info(f"Restored tracking session: {state.category} from {state.start_time}")
        return state

    def _remove(self) -> bool:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Failed to remove tracking state file {self._path}: {e}")
            return False
        return True


__all__ = ["SessionStore"]

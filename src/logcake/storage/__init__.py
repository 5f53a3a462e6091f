"""Storage module for Log Cake.

Provides JSON persistence for completed entries and crash recovery of the
active session.
"""

from .entries import EntryStore
from .session import SessionStore

__all__ = [
    "EntryStore",
    "SessionStore",
]

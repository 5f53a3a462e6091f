"""Data models for time tracking.

Defines Category, TimeEntry and CurrentTrackingState.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import Any


def format_instant(instant: datetime) -> str:
    """Serialize an instant as ISO-8601 with whole seconds."""
    return instant.isoformat(timespec="seconds")


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 instant.

    Naive values are interpreted as local time.
    """
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


@dataclass(frozen=True)
class Category:
    """A trackable activity category.

    Attributes:
        name: Display label and storage key
        color: Menu indicator color (presentation only)
        counts_as_active: Whether time in this category counts towards
            the total active time of a summary
    """

    name: str
    color: str = "gray"
    counts_as_active: bool = True


DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category("Work", color="indigo"),
    Category("Creative", color="pink"),
    Category("Learning", color="green"),
    Category("Break", color="yellow", counts_as_active=False),
)


class CategorySet:
    """Ordered, fixed set of categories with unique names."""

    def __init__(self, categories: Iterable[Category] = DEFAULT_CATEGORIES) -> None:
        self._categories = tuple(categories)
        self._by_name: dict[str, Category] = {}
        for category in self._categories:
            if category.name in self._by_name:
                raise ValueError(f"Duplicate category name: {category.name!r}")
            self._by_name[category.name] = category

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Category | None:
        return self._by_name.get(name)

    @property
    def names(self) -> list[str]:
        return [c.name for c in self._categories]

    def is_active(self, name: str) -> bool:
        """Whether ``name`` counts as active time.

        Unknown names count as active.
        """
        category = self._by_name.get(name)
        return category.counts_as_active if category else True


@dataclass(frozen=True)
class TimeEntry:
    """A completed tracking interval.

    Attributes:
        category: Category name
        start_time: When tracking started
        end_time: When tracking stopped (never before start_time)
    """

    category: str
    start_time: datetime
    end_time: datetime

    def __post_init__(self) -> None:
        if self.end_time < self.start_time:
            raise ValueError(
                f"Entry for {self.category!r} ends before it starts "
                f"({format_instant(self.end_time)} < {format_instant(self.start_time)})"
            )

    @property
    def duration_seconds(self) -> int:
        """Whole seconds between start and end."""
        return int((self.end_time - self.start_time).total_seconds())

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk JSON form."""
        return {
            "category": self.category,
            "startTime": format_instant(self.start_time),
            "endTime": format_instant(self.end_time),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TimeEntry":
        """Create from the on-disk JSON form.

        Raises:
            KeyError: If a field is missing
            ValueError: If a timestamp is malformed or the interval is negative
        """
        return cls(
            category=str(data["category"]),
            start_time=parse_instant(data["startTime"]),
            end_time=parse_instant(data["endTime"]),
        )


@dataclass(frozen=True)
class CurrentTrackingState:
    """The session in progress."""

    category: str
    start_time: datetime

    def elapsed_seconds(self, now: datetime) -> int:
        return max(0, int((now - self.start_time).total_seconds()))

    def as_entry(self, end_time: datetime) -> TimeEntry:
        """Materialize the running session as an entry ending at ``end_time``.

        The session itself is unchanged; the caller decides whether the
        entry is recorded (on stop) or only reported (live exports).
        """
        return TimeEntry(
            category=self.category,
            start_time=self.start_time,
            end_time=max(end_time, self.start_time),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "startTime": format_instant(self.start_time),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CurrentTrackingState":
        return cls(
            category=str(data["category"]),
            start_time=parse_instant(data["startTime"]),
        )


__all__ = [
    "DEFAULT_CATEGORIES",
    "Category",
    "CategorySet",
    "CurrentTrackingState",
    "TimeEntry",
    "format_instant",
    "parse_instant",
]

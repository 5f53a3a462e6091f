"""Daily summary export.

Aggregates entries by category into a plain text report, and writes the
raw entry log as JSON.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from logcake.storage.codec import write_entries
from logcake.tracking.models import CategorySet, TimeEntry

logger = logging.getLogger(__name__)

REPORT_TITLE = "✦ Time Slice ✦"
REPORT_RULE = "─" * 16
TOTAL_LABEL = "Total Active"


def format_duration(seconds: int) -> str:
    """Format seconds as HH:MM:SS; hours are not wrapped at 24."""
    hours, remainder = divmod(max(0, int(seconds)), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def report_filename(day: datetime) -> str:
    return f"time-tracking-{day.strftime('%Y-%m-%d')}.txt"


@dataclass
class CategoryBreakdown:
    """Time breakdown for a single category."""

    category: str
    total_seconds: int
    entry_count: int
    counts_as_active: bool


@dataclass
class DailySummary:
    """Aggregated tracked time for one day."""

    day: datetime
    categories: list[CategoryBreakdown]
    total_active_seconds: int
    entry_count: int

    def get(self, category: str) -> CategoryBreakdown | None:
        for breakdown in self.categories:
            if breakdown.category == category:
                return breakdown
        return None

    def to_text(self) -> str:
        """Render the fixed-format text report."""
        width = max([len(TOTAL_LABEL)] + [len(b.category) for b in self.categories])

        lines = [
            REPORT_TITLE,
            f"{self.day.strftime('%B')} {self.day.day}, {self.day.year}",
            REPORT_RULE,
            "",
        ]
        for breakdown in self.categories:
            lines.append(f"{breakdown.category.ljust(width)}: {format_duration(breakdown.total_seconds)}")

        lines.append("")
        lines.append(REPORT_RULE)
        lines.append(f"{TOTAL_LABEL.ljust(width)}: {format_duration(self.total_active_seconds)}")
        return "\n".join(lines) + "\n"


class SummaryExporter:
    """Builds and writes daily summaries.

    The exporter works on the entry list it is given and never reads the
    session controller; callers materialize a running session themselves.
    """

    def __init__(
        self,
        categories: CategorySet,
        report_dir: Path | str,
        json_path: Path | str,
    ) -> None:
        """Initialize exporter.

        Args:
            categories: Configured categories, in report order
            report_dir: Directory for time-tracking-YYYY-MM-DD.txt files
            json_path: Fixed destination of JSON exports
        """
        self._categories = categories
        self._report_dir = Path(report_dir)
        self._json_path = Path(json_path)

    @property
    def report_dir(self) -> Path:
        return self._report_dir

    @property
    def json_path(self) -> Path:
        return self._json_path

    def report_path(self, day: datetime) -> Path:
        return self._report_dir / report_filename(day)

    def summarize(self, entries: Iterable[TimeEntry], day: datetime) -> DailySummary:
        """Group entries by category and total their durations.

        Every configured category is listed, in configured order, even with
        no time. Unconfigured categories follow in order of appearance.
        """
        totals: dict[str, int] = {name: 0 for name in self._categories.names}
        counts: dict[str, int] = {name: 0 for name in self._categories.names}
        entry_count = 0

        for entry in entries:
            if entry.category not in totals:
                logger.warning(f"Summarizing unconfigured category '{entry.category}'")
                totals[entry.category] = 0
                counts[entry.category] = 0
            totals[entry.category] += entry.duration_seconds
            counts[entry.category] += 1
            entry_count += 1

        breakdowns = [
            CategoryBreakdown(
                category=name,
                total_seconds=seconds,
                entry_count=counts[name],
                counts_as_active=self._categories.is_active(name),
            )
            for name, seconds in totals.items()
        ]

        return DailySummary(
            day=day,
            categories=breakdowns,
            total_active_seconds=sum(b.total_seconds for b in breakdowns if b.counts_as_active),
            entry_count=entry_count,
        )

    def export(
        self,
        entries: Iterable[TimeEntry],
        *,
        day: datetime,
        as_json: bool = False,
        write_to_disk: bool = True,
    ) -> tuple[DailySummary | None, Path | None]:
        """Export entries as a text report or a JSON log.

        Args:
            entries: Entries to export; include a synthetic entry for a
                running session to report it live
            day: Day the report describes (names the report file)
            as_json: Write the raw entry list instead of a report
            write_to_disk: When False, only build the summary

        Returns:
            (summary, written path). The summary is None in JSON mode; the
            path is None when nothing was written.
        """
        entries = list(entries)

        if as_json:
            path = self.write_json(entries) if write_to_disk else None
            return None, path

        summary = self.summarize(entries, day)
        path = self.write_report(summary) if write_to_disk else None
        return summary, path

    def write_report(self, summary: DailySummary) -> Path | None:
        """Write the text report, overwriting any earlier one for that day.

        Returns:
            Path written, or None on failure
        """
        path = self.report_path(summary.day)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(summary.to_text(), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save summary to {path}: {e}")
            return None

        logger.info(f"Saved summary to: {path}")
        return path

    def write_json(self, entries: Iterable[TimeEntry]) -> Path | None:
        """Write entries verbatim as a JSON array.

        Returns:
            Path written, or None on failure
        """
        try:
            write_entries(self._json_path, entries)
        except (OSError, TypeError) as e:
            logger.error(f"Failed to save entries to {self._json_path}: {e}")
            return None

        logger.info(f"Saved entries to: {self._json_path}")
        return self._json_path


__all__ = [
    "CategoryBreakdown",
    "DailySummary",
    "SummaryExporter",
    "format_duration",
    "report_filename",
]

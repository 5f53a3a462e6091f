"""Export module for Log Cake.

Provides daily text summaries and JSON entry logs.
"""

from .summary import CategoryBreakdown, DailySummary, SummaryExporter, format_duration

__all__ = [
    "CategoryBreakdown",
    "DailySummary",
    "SummaryExporter",
    "format_duration",
]

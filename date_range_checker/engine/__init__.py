from .coverage import (
    GapReport,
    build_coverage,
    check_coverage,
    find_missing_ranges,
    has_missing_ranges,
)
from .ranges import DaySpan, dates_to_ranges, range_to_dates, to_day

__all__ = [
    "DaySpan",
    "GapReport",
    "build_coverage",
    "check_coverage",
    "dates_to_ranges",
    "find_missing_ranges",
    "has_missing_ranges",
    "range_to_dates",
    "to_day",
]

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from itertools import chain
from typing import Any

from ..core.errors import NullArgumentError
from ..core.logging_config import get_logger
from ..core.models import DateRange
from .ranges import dates_to_ranges, range_to_dates

logger = get_logger(__name__)


dataclass_kwargs = {"slots": True}


@dataclass(frozen=True, **dataclass_kwargs)
class GapReport:
    requested: DateRange
    missing: tuple[DateRange, ...]

    @property
    def has_gaps(self) -> bool:
        return bool(self.missing)

    @property
    def missing_days(self) -> int:
        return sum(r.days for r in self.missing)

    @property
    def covered_days(self) -> int:
        return self.requested.days - self.missing_days

    def to_dict(self) -> dict[str, Any]:
        return {
            "requested": self.requested.to_dict(),
            "has_gaps": self.has_gaps,
            "missing_days": self.missing_days,
            "covered_days": self.covered_days,
            "missing": [r.to_dict() for r in self.missing],
        }


def build_coverage(ranges: Iterable[DateRange | tuple[date, date]]) -> frozenset[date]:
    """Union every day of every range into one set.

    Overlapping ranges are deduplicated by the set. A range whose start is
    after its end raises ``OutOfRangeError``.
    """
    if ranges is None:
        raise NullArgumentError("ranges")
    # Build the full list first so the set is sized once
    days = list(chain.from_iterable(range_to_dates(r) for r in ranges))
    coverage = frozenset(days)
    logger.debug(
        "Built coverage set",
        extra={"expanded_days": len(days), "unique_days": len(coverage)},
    )
    return coverage


def find_missing_ranges(
    requested: DateRange | tuple[date, date],
    coverage: frozenset[date] | set[date],
) -> list[DateRange]:
    """Return the runs of requested days absent from ``coverage``, ascending."""
    if coverage is None:
        raise NullArgumentError("coverage")
    # Filtering keeps the ascending order dates_to_ranges requires
    uncovered = (d for d in range_to_dates(requested) if d not in coverage)
    return list(dates_to_ranges(uncovered))


def has_missing_ranges(
    requested: DateRange | tuple[date, date],
    coverage: frozenset[date] | set[date],
) -> tuple[bool, list[DateRange]]:
    missing = find_missing_ranges(requested, coverage)
    return bool(missing), missing


def check_coverage(
    requested: DateRange | tuple[date, date],
    file_ranges: Iterable[DateRange | tuple[date, date]],
) -> GapReport:
    """Diff a requested range against the ranges covered by files."""
    if requested is None:
        raise NullArgumentError("requested")
    span = range_to_dates(requested)
    requested_range = DateRange(start=span.start, end=span.end)

    coverage = build_coverage(file_ranges)
    missing = find_missing_ranges(requested_range, coverage)
    logger.info(
        "Checked coverage",
        extra={
            "requested": requested_range.format(),
            "missing_ranges": len(missing),
        },
    )
    return GapReport(requested=requested_range, missing=tuple(missing))

"""Conversions between inclusive date ranges and ordered day sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..core.errors import NullArgumentError, OutOfRangeError
from ..core.models import DateRange

ONE_DAY = timedelta(days=1)


def to_day(value: date) -> date:
    """Truncate a date or datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class DaySpan:
    """Lazy, restartable sequence of every day from ``start`` to ``end``."""

    start: date
    end: date

    def __iter__(self) -> Iterator[date]:
        if self.start > self.end:
            return
        current = self.start
        while True:
            yield current
            # Stop before stepping past date.max
            if current >= self.end:
                return
            current += ONE_DAY

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, date):
            return False
        return self.start <= to_day(item) <= self.end


def range_to_dates(date_range: DateRange | tuple[date, date]) -> DaySpan:
    """Expand an inclusive range into its days.

    Both endpoints are truncated to the day before they are compared.

    Raises:
        NullArgumentError: the range or one of its endpoints is None.
        OutOfRangeError: the start is later than the end.
    """
    if date_range is None:
        raise NullArgumentError("date_range")
    start, end = date_range
    if start is None:
        raise NullArgumentError("start")
    if end is None:
        raise NullArgumentError("end")

    start, end = to_day(start), to_day(end)
    if start > end:
        raise OutOfRangeError(start, end)
    return DaySpan(start=start, end=end)


def dates_to_ranges(dates: Iterable[date]) -> Iterator[DateRange]:
    """Compress ascending days into minimal runs of consecutive days.

    ``dates`` must be sorted ascending. A repeated day extends nothing and
    splits nothing. The result is lazy; call again to restart.

    Raises:
        NullArgumentError: ``dates`` is None.
    """
    if dates is None:
        raise NullArgumentError("dates")
    return _iter_ranges(dates)


def _iter_ranges(dates: Iterable[date]) -> Iterator[DateRange]:
    it = iter(dates)
    first = next(it, None)
    if first is None:
        return

    start = end = to_day(first)
    for value in it:
        current = to_day(value)
        if current == end:
            continue
        if current - end == ONE_DAY:
            end = current
        else:
            yield DateRange(start=start, end=end)
            start = end = current

    yield DateRange(start=start, end=end)

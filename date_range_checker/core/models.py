from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days.

    ``start <= end`` is checked where the range is expanded, not here, so a
    malformed pair coming from a filename can still be carried around and
    reported.
    """

    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def __iter__(self) -> Iterator[date]:
        # Lets a range unpack like the (start, end) pair it models
        yield self.start
        yield self.end

    def format(self) -> str:
        return f"{self.start.strftime(DATE_FORMAT)} - {self.end.strftime(DATE_FORMAT)}"

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}

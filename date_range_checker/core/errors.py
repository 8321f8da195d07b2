"""Exception hierarchy for date range checking.

Engine failures are deterministic input-validation errors: nothing here is
retried. The CLI turns any ``DateRangeCheckerError`` into a user-facing
message and a non-zero exit code.
"""

from __future__ import annotations

from typing import Any


class DateRangeCheckerError(Exception):
    """Base exception for date range checker errors."""
    pass


class NullArgumentError(DateRangeCheckerError, TypeError):
    """A required argument was None."""

    def __init__(self, name: str):
        super().__init__(f"Argument '{name}' cannot be None.")
        self.name = name


class OutOfRangeError(DateRangeCheckerError, ValueError):
    """A range starts later than it ends."""

    def __init__(self, start: Any, end: Any, message: str | None = None):
        super().__init__(
            message or "Range start date cannot be later than the end date."
        )
        self.start = start
        self.end = end


class InvalidPatternError(DateRangeCheckerError, ValueError):
    """File extension pattern is not a valid regular expression."""
    pass


class DirectoryNotFoundError(DateRangeCheckerError, FileNotFoundError):
    """Scan directory does not exist or is not a directory."""
    pass

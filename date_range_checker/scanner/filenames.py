"""Extract date ranges from the names of files in a directory.

A matching file name contains at least two ``YYYY-MM-DD`` dates; the first
one is the range start and the last one is the range end, e.g.
``statement_2023-01-01_2023-01-31.pdf``. Files that do not match are skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from ..core.errors import DirectoryNotFoundError, InvalidPatternError, NullArgumentError
from ..core.logging_config import get_logger
from ..core.models import DATE_FORMAT, DateRange

logger = get_logger(__name__)

# Greedy ".*" makes the end group capture the last date in the name
FILENAME_PATTERN = re.compile(
    r"(?P<start_date>[0-9]{4}-[0-9]{2}-[0-9]{2}).*(?P<end_date>[0-9]{4}-[0-9]{2}-[0-9]{2})"
)
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(frozen=True)
class ScannedFile:
    path: Path
    date_range: DateRange


def parse_iso8601_date(text: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` date.

    Raises:
        NullArgumentError: ``text`` is None.
        ValueError: ``text`` is not a valid calendar date in that format.
    """
    if text is None:
        raise NullArgumentError("text")
    if not ISO_DATE_PATTERN.fullmatch(text):
        raise ValueError(f"'{text}' is not a YYYY-MM-DD date.")
    return datetime.strptime(text, DATE_FORMAT).date()


def compile_extension_pattern(pattern: str | None) -> re.Pattern[str]:
    """Compile a file extension pattern written without the leading dot.

    Suffixes are matched with their dot (``.pdf``), so every ``^`` anchor is
    rewritten to ``^\\.``. An empty pattern matches every file.
    """
    if pattern is None:
        raise NullArgumentError("pattern")
    try:
        return re.compile(pattern.replace("^", r"^\."))
    except re.error as e:
        raise InvalidPatternError(f"Invalid file extension pattern '{pattern}': {e}") from e


def parse_filename(name: str) -> DateRange | None:
    """Return the range embedded in a file name, or None when there is none.

    Names whose dates match the pattern but are not real calendar dates
    (``2023-02-30``) are treated as non-matching.
    """
    if name is None:
        raise NullArgumentError("name")
    match = FILENAME_PATTERN.search(name)
    if not match:
        return None
    try:
        start = parse_iso8601_date(match.group("start_date"))
        end = parse_iso8601_date(match.group("end_date"))
    except ValueError:
        logger.warning("Skipping file with invalid date in name", extra={"file_name": name})
        return None
    return DateRange(start=start, end=end)


def scan_directory(
    directory: Path | str,
    extension_pattern: str | re.Pattern[str] = "",
) -> list[ScannedFile]:
    """List the files directly inside ``directory`` that carry a date range.

    Raises:
        NullArgumentError: ``directory`` or ``extension_pattern`` is None.
        DirectoryNotFoundError: ``directory`` does not exist or is a file.
        InvalidPatternError: ``extension_pattern`` is not a valid regex.
    """
    if directory is None:
        raise NullArgumentError("directory")
    if extension_pattern is None:
        raise NullArgumentError("extension_pattern")

    root = Path(directory)
    if not root.is_dir():
        raise DirectoryNotFoundError(f"Could not find directory '{root}'.")

    if isinstance(extension_pattern, re.Pattern):
        ext_re = extension_pattern
    else:
        ext_re = compile_extension_pattern(extension_pattern)

    scanned: list[ScannedFile] = []
    skipped = 0
    for path in sorted(p for p in root.iterdir() if p.is_file()):
        if not ext_re.search(path.suffix):
            skipped += 1
            continue
        date_range = parse_filename(path.name)
        if date_range is None:
            skipped += 1
            continue
        scanned.append(ScannedFile(path=path, date_range=date_range))

    logger.info(
        "Scanned directory",
        extra={"directory": str(root), "matched": len(scanned), "skipped": skipped},
    )
    return scanned

"""Tests for coverage building and gap detection."""

from __future__ import annotations

from datetime import date

import pytest

from date_range_checker.core.errors import NullArgumentError, OutOfRangeError
from date_range_checker.core.models import DateRange
from date_range_checker.engine.coverage import (
    GapReport,
    build_coverage,
    check_coverage,
    find_missing_ranges,
    has_missing_ranges,
)


def r(start: str, end: str) -> DateRange:
    return DateRange(date.fromisoformat(start), date.fromisoformat(end))


def test_build_coverage_unions_overlapping_ranges():
    """Test overlapping file ranges are deduplicated silently."""
    coverage = build_coverage([r("2023-01-01", "2023-01-03"), r("2023-01-02", "2023-01-05")])
    assert isinstance(coverage, frozenset)
    assert len(coverage) == 5
    assert min(coverage) == date(2023, 1, 1)
    assert max(coverage) == date(2023, 1, 5)


def test_build_coverage_empty():
    assert build_coverage([]) == frozenset()


def test_build_coverage_accepts_pairs():
    coverage = build_coverage([(date(2023, 1, 1), date(2023, 1, 2))])
    assert coverage == {date(2023, 1, 1), date(2023, 1, 2)}


def test_build_coverage_reversed_range_raises():
    with pytest.raises(OutOfRangeError):
        build_coverage([r("2023-01-01", "2023-01-02"), r("2023-01-10", "2023-01-05")])


def test_build_coverage_none_raises():
    with pytest.raises(NullArgumentError):
        build_coverage(None)


@pytest.mark.parametrize(
    "coverage_ranges,requested,expected",
    [
        # Trailing gap
        (
            [r("2023-01-01", "2023-01-03")],
            r("2023-01-01", "2023-01-05"),
            [r("2023-01-04", "2023-01-05")],
        ),
        # Fully covered
        (
            [r("2023-01-01", "2023-01-05")],
            r("2023-01-02", "2023-01-04"),
            [],
        ),
        # Gap in the middle
        (
            [r("2023-01-01", "2023-01-02"), r("2023-01-05", "2023-01-06")],
            r("2023-01-01", "2023-01-06"),
            [r("2023-01-03", "2023-01-04")],
        ),
        # Nothing covered
        (
            [],
            r("2023-01-01", "2023-01-03"),
            [r("2023-01-01", "2023-01-03")],
        ),
        # Leading, middle and trailing gaps
        (
            [r("2023-01-03", "2023-01-04"), r("2023-01-07", "2023-01-07")],
            r("2023-01-01", "2023-01-09"),
            [
                r("2023-01-01", "2023-01-02"),
                r("2023-01-05", "2023-01-06"),
                r("2023-01-08", "2023-01-09"),
            ],
        ),
    ],
)
def test_find_missing_ranges(coverage_ranges, requested, expected):
    coverage = build_coverage(coverage_ranges)
    assert find_missing_ranges(requested, coverage) == expected


def test_has_missing_ranges_flag():
    coverage = build_coverage([r("2023-01-01", "2023-01-03")])

    has_gaps, missing = has_missing_ranges(r("2023-01-01", "2023-01-05"), coverage)
    assert has_gaps is True
    assert missing == [r("2023-01-04", "2023-01-05")]

    has_gaps, missing = has_missing_ranges(r("2023-01-02", "2023-01-03"), coverage)
    assert has_gaps is False
    assert missing == []


def test_reversed_request_raises():
    """Test a requested range ending before it starts propagates OutOfRangeError."""
    coverage = build_coverage([r("2023-01-01", "2023-12-31")])
    with pytest.raises(OutOfRangeError):
        find_missing_ranges(r("2023-03-01", "2023-02-01"), coverage)
    with pytest.raises(OutOfRangeError):
        check_coverage(r("2023-03-01", "2023-02-01"), [])


def test_missing_ranges_none_coverage_raises():
    with pytest.raises(NullArgumentError):
        find_missing_ranges(r("2023-01-01", "2023-01-02"), None)


def test_check_coverage_report():
    report = check_coverage(
        r("2023-01-01", "2023-01-10"),
        [r("2023-01-01", "2023-01-02"), r("2023-01-05", "2023-01-08")],
    )
    assert isinstance(report, GapReport)
    assert report.has_gaps
    assert report.missing == (r("2023-01-03", "2023-01-04"), r("2023-01-09", "2023-01-10"))
    assert report.missing_days == 4
    assert report.covered_days == 6
    assert report.to_dict() == {
        "requested": {"start": "2023-01-01", "end": "2023-01-10"},
        "has_gaps": True,
        "missing_days": 4,
        "covered_days": 6,
        "missing": [
            {"start": "2023-01-03", "end": "2023-01-04"},
            {"start": "2023-01-09", "end": "2023-01-10"},
        ],
    }


def test_check_coverage_no_gaps():
    report = check_coverage(r("2023-01-02", "2023-01-04"), [r("2023-01-01", "2023-01-05")])
    assert not report.has_gaps
    assert report.missing == ()
    assert report.covered_days == 3


def test_date_range_helpers():
    rng = r("2023-01-04", "2023-01-05")
    start, end = rng
    assert (start, end) == (date(2023, 1, 4), date(2023, 1, 5))
    assert rng.days == 2
    assert rng.format() == "2023-01-04 - 2023-01-05"

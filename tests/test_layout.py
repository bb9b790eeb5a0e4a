"""Tests for the reference-moment date layouts."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core import layout
from core.layout import NAMED_LAYOUTS, format_datetime


@pytest.mark.parametrize(
    "fmt, expected",
    [
        (layout.ANSIC, "Mon Jan  2 15:04:05 2006"),
        (layout.UNIX_DATE, "Mon Jan  2 15:04:05 MST 2006"),
        (layout.RUBY_DATE, "Mon Jan 02 15:04:05 -0700 2006"),
        (layout.RFC822, "02 Jan 06 15:04 MST"),
        (layout.RFC850, "Monday, 02-Jan-06 15:04:05 MST"),
        (layout.RFC1123Z, "Mon, 02 Jan 2006 15:04:05 -0700"),
        (layout.RFC3339, "2006-01-02T15:04:05-07:00"),
        (layout.RFC3339_NANO, "2006-01-02T15:04:05.123456-07:00"),
        (layout.KITCHEN, "3:04PM"),
        (layout.STAMP_MILLI, "Jan  2 15:04:05.123"),
        (layout.DATE_TIME, "2006-01-02 15:04:05"),
        (layout.DATE_ONLY, "2006-01-02"),
        (layout.TIME_ONLY, "15:04:05"),
    ],
)
def test_reference_moment_renders_itself(reference_moment: datetime, fmt: str, expected: str) -> None:
    """Formatting the reference moment reproduces the layout."""
    assert format_datetime(reference_moment, fmt) == expected


def test_named_layouts_complete() -> None:
    assert NAMED_LAYOUTS["RFC3339"] == layout.RFC3339
    assert NAMED_LAYOUTS["Kitchen"] == "3:04PM"
    assert len(NAMED_LAYOUTS) == 17


def test_other_moment() -> None:
    moment = datetime(2024, 3, 5, 0, 7, 9, tzinfo=timezone.utc)
    assert format_datetime(moment, "Monthly Janet 2006") == "Monthly Janet 2024"
    assert format_datetime(moment, "January Monday 2 _2 1 06") == "March Tuesday 5  5 3 24"
    assert format_datetime(moment, "03:04:05 pm PM") == "12:07:09 am AM"
    assert format_datetime(moment, "3 4 5") == "12 7 9"
    assert format_datetime(moment, "002|__2") == "065| 65"


def test_zone_tokens_utc() -> None:
    """Z-prefixed offsets print Z for UTC; numeric ones never do."""
    moment = datetime(2024, 3, 5, 10, 0, tzinfo=timezone.utc)
    assert format_datetime(moment, "Z07:00 Z0700 Z07") == "Z Z Z"
    assert format_datetime(moment, "-07:00 -0700 -07") == "+00:00 +0000 +00"
    assert format_datetime(moment, "MST") == "UTC"


def test_zone_tokens_offset(reference_moment: datetime) -> None:
    assert format_datetime(reference_moment, "Z07") == "-07"
    assert format_datetime(reference_moment, "Z07:00:00") == "-07:00:00"
    assert format_datetime(reference_moment, "-070000") == "-070000"


def test_fractional_seconds(reference_moment: datetime) -> None:
    assert format_datetime(reference_moment, "05.000") == "05.123"
    assert format_datetime(reference_moment, "05,000000") == "05,123456"
    assert format_datetime(reference_moment, "05.000000000") == "05.123456000"
    assert format_datetime(reference_moment, "05.99") == "05.12"


def test_fraction_all_zero_is_dropped() -> None:
    moment = datetime(2024, 3, 5, 10, 0, 1, tzinfo=timezone.utc)
    assert format_datetime(moment, "05.999") == "01"
    assert format_datetime(moment, "05.000") == "01.000"


def test_literals_are_kept(reference_moment: datetime) -> None:
    """Text that is not a token passes through unchanged."""
    assert format_datetime(reference_moment, "at h:m") == "at h:m"
    assert format_datetime(reference_moment, "_2006") == "_2006"
    assert format_datetime(reference_moment, "2006.01.02") == "2006.01.02"
    assert format_datetime(reference_moment, "Monthly Janet 2006") == "Monthly Janet 2006"
    assert format_datetime(reference_moment, "Mon, Jan 2") == "Mon, Jan 2"
    assert format_datetime(reference_moment, "MonJan") == "MonJan"

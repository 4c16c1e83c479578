"""Tests for moment-style formatting of resolved instants."""

from __future__ import annotations

from datetime import datetime

import pytest

from src.nldates.formatting import INVALID_DATE, format_instant

VALUE = datetime(2024, 6, 12, 15, 5, 9)


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("YYYY-MM-DD", "2024-06-12"),
        ("HH:mm", "15:05"),
        ("YYYY-MM-DD HH:mm:ss", "2024-06-12 15:05:09"),
        ("D/M/YY", "12/6/24"),
        ("h:mm A", "3:05 PM"),
        ("hh:mm a", "03:05 pm"),
        ("dddd, MMMM Do YYYY", "Wednesday, June 12th 2024"),
        ("ddd MMM D", "Wed Jun 12"),
        ("[Week of] YYYY-MM-DD", "Week of 2024-06-12"),
    ],
)
def test_format_patterns(pattern: str, expected: str) -> None:
    assert format_instant(VALUE, pattern) == expected


@pytest.mark.parametrize(
    ("day", "expected"),
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (13, "13th"),
     (21, "21st"), (22, "22nd"), (23, "23rd"), (31, "31st")],
)
def test_ordinal_day(day: int, expected: str) -> None:
    assert format_instant(datetime(2024, 1, day), "Do") == expected


def test_midnight_twelve_hour_clock() -> None:
    assert format_instant(datetime(2024, 6, 12, 0, 0), "h A") == "12 AM"


def test_localized_names() -> None:
    assert format_instant(VALUE, "MMMM", locale="de_DE") == "Juni"


def test_unparseable_marker_formats_as_invalid_date() -> None:
    assert format_instant(None, "YYYY-MM-DD") == INVALID_DATE == "Invalid date"

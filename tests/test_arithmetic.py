"""Tests for calendar-aware date arithmetic."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.nldates import arithmetic
from src.nldates.dictionaries import Unit
from src.nldates.schema import Weekday

WEDNESDAY = datetime(2024, 6, 12, 10, 30, 45, 123)


def test_offset_clamps_month_end() -> None:
    assert arithmetic.offset(datetime(2024, 1, 31, 8), Unit.month, 1) == datetime(2024, 2, 29)
    assert arithmetic.offset(datetime(2023, 1, 31, 8), Unit.month, 1) == datetime(2023, 2, 28)
    assert arithmetic.offset(datetime(2024, 3, 31), Unit.month, -1) == datetime(2024, 2, 29)


def test_offset_calendar_units_land_on_midnight() -> None:
    assert arithmetic.offset(WEDNESDAY, Unit.day, 1) == datetime(2024, 6, 13)
    assert arithmetic.offset(WEDNESDAY, Unit.week, -2) == datetime(2024, 5, 29)
    assert arithmetic.offset(WEDNESDAY, Unit.year, 1) == datetime(2025, 6, 12)


def test_offset_clock_units_keep_time() -> None:
    assert arithmetic.offset(WEDNESDAY, Unit.hour, 2) == datetime(2024, 6, 12, 12, 30, 45, 123)
    assert arithmetic.offset(WEDNESDAY, Unit.minute, -31) == datetime(2024, 6, 12, 9, 59, 45, 123)


def test_offset_out_of_range_raises() -> None:
    with pytest.raises(ValueError):
        arithmetic.offset(WEDNESDAY, Unit.year, 10_000)


@pytest.mark.parametrize(
    ("week_start", "expected"),
    [
        (Weekday.monday, datetime(2024, 6, 10)),
        (Weekday.sunday, datetime(2024, 6, 9)),
        (Weekday.wednesday, datetime(2024, 6, 12)),
        (Weekday.thursday, datetime(2024, 6, 6)),
        (Weekday.saturday, datetime(2024, 6, 8)),
    ],
)
def test_start_of_week_uses_week_start(week_start: Weekday, expected: datetime) -> None:
    assert arithmetic.start_of(WEDNESDAY, Unit.week, week_start) == expected


def test_start_of_other_units() -> None:
    assert arithmetic.start_of(WEDNESDAY, Unit.day, Weekday.monday) == datetime(2024, 6, 12)
    assert arithmetic.start_of(WEDNESDAY, Unit.month, Weekday.monday) == datetime(2024, 6, 1)
    assert arithmetic.start_of(WEDNESDAY, Unit.year, Weekday.monday) == datetime(2024, 1, 1)
    with pytest.raises(ValueError):
        arithmetic.start_of(WEDNESDAY, Unit.hour, Weekday.monday)


def test_weekday_lookups() -> None:
    assert arithmetic.next_weekday(WEDNESDAY, Weekday.wednesday) == datetime(2024, 6, 19)
    assert arithmetic.previous_weekday(WEDNESDAY, Weekday.wednesday) == datetime(2024, 6, 5)
    assert arithmetic.upcoming_weekday(WEDNESDAY, Weekday.wednesday) == datetime(2024, 6, 12)
    assert arithmetic.next_weekday(WEDNESDAY, Weekday.thursday) == datetime(2024, 6, 13)
    assert arithmetic.previous_weekday(WEDNESDAY, Weekday.tuesday) == datetime(2024, 6, 11)
    assert arithmetic.upcoming_weekday(WEDNESDAY, Weekday.tuesday) == datetime(2024, 6, 18)


def test_time_helpers_keep_tzinfo() -> None:
    aware = datetime(2024, 6, 12, 10, 30, tzinfo=timezone.utc)
    assert arithmetic.midnight(aware) == datetime(2024, 6, 12, tzinfo=timezone.utc)
    assert arithmetic.at_time(aware, 15, 5) == datetime(2024, 6, 12, 15, 5, tzinfo=timezone.utc)
    assert arithmetic.at_time(aware, 15, 5).tzinfo is timezone.utc

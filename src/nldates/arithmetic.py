"""Date arithmetic engine.

All helpers operate on the reference's own wall-clock time: `tzinfo` is carried through untouched and no
time-zone conversion happens. Month and year offsets use `relativedelta`, which clamps to the last valid
day of the target month (Jan 31 + 1 month -> Feb 29 in a leap year) instead of overflowing.

Out-of-range results surface as `ValueError`/`OverflowError`; the resolver turns them into the
unparseable marker.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from src.nldates.dictionaries import CALENDAR_UNITS, Unit
from src.nldates.schema import Weekday

# Indexed by `Weekday` (Monday is 0), same as `datetime.weekday()`.
_RELATIVEDELTA_WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)


def midnight(instant: datetime) -> datetime:
    """Return 00:00 of the instant's calendar day."""

    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def at_time(instant: datetime, hour: int, minute: int = 0) -> datetime:
    """Keep the instant's date and set only the time of day."""

    return instant.replace(hour=hour, minute=minute, second=0, microsecond=0)


def offset(instant: datetime, unit: Unit, count: int) -> datetime:
    """Shift `instant` by `count` units (negative counts go back in time).

    Calendar units (day, week, month, year) land on midnight of the resulting day; hour and minute
    offsets keep the exact reference time.
    """

    delta = relativedelta(**{f"{unit.value}s": count})
    if unit in CALENDAR_UNITS:
        return midnight(instant) + delta
    return instant + delta


def start_of(instant: datetime, unit: Unit, week_start: Weekday) -> datetime:
    """Return the first instant of the unit containing `instant`.

    Weeks are anchored at `week_start`; the other units ignore it.
    """

    day = midnight(instant)
    if unit is Unit.day:
        return day
    if unit is Unit.week:
        return day - timedelta(days=(day.weekday() - week_start) % 7)
    if unit is Unit.month:
        return day.replace(day=1)
    if unit is Unit.year:
        return day.replace(month=1, day=1)
    raise ValueError(f"unsupported unit for start_of: {unit}")


def next_weekday(instant: datetime, weekday: Weekday) -> datetime:
    """Nearest `weekday` strictly after the instant's date."""

    return midnight(instant) + relativedelta(days=+1, weekday=_RELATIVEDELTA_WEEKDAYS[weekday](+1))


def previous_weekday(instant: datetime, weekday: Weekday) -> datetime:
    """Nearest `weekday` strictly before the instant's date."""

    return midnight(instant) + relativedelta(days=-1, weekday=_RELATIVEDELTA_WEEKDAYS[weekday](-1))


def upcoming_weekday(instant: datetime, weekday: Weekday) -> datetime:
    """Nearest `weekday` on or after the instant's date (today counts)."""

    return midnight(instant) + relativedelta(weekday=_RELATIVEDELTA_WEEKDAYS[weekday](+1))

"""English vocabularies for weekdays, units, and number words.

These mappings are used by the rule table and should remain small and deterministic. Each dictionary
also provides a regex alternation (longest phrase first) so rule patterns stay in sync with it.
"""

from __future__ import annotations

import re
from enum import StrEnum

from src.nldates.schema import Weekday


class Unit(StrEnum):
    """Arithmetic units a phrase can offset by."""

    minute = "minute"
    hour = "hour"
    day = "day"
    week = "week"
    month = "month"
    year = "year"


# Units that land on midnight after an offset; the rest keep the reference time.
CALENDAR_UNITS: frozenset[Unit] = frozenset({Unit.day, Unit.week, Unit.month, Unit.year})

WEEKDAY_SYNONYMS: dict[Weekday, tuple[str, ...]] = {
    Weekday.monday: ("monday", "mon"),
    Weekday.tuesday: ("tuesday", "tues", "tue"),
    Weekday.wednesday: ("wednesday", "wed"),
    Weekday.thursday: ("thursday", "thurs", "thur", "thu"),
    Weekday.friday: ("friday", "fri"),
    Weekday.saturday: ("saturday", "sat"),
    Weekday.sunday: ("sunday", "sun"),
}

UNIT_SYNONYMS: dict[Unit, tuple[str, ...]] = {
    Unit.minute: ("minutes", "minute", "mins", "min"),
    Unit.hour: ("hours", "hour", "hrs", "hr", "h"),
    Unit.day: ("days", "day", "d"),
    Unit.week: ("weeks", "week", "wks", "wk"),
    Unit.month: ("months", "month", "mos", "mo"),
    Unit.year: ("years", "year", "yrs", "yr"),
}

NUMBER_WORDS: dict[str, int] = {
    "a": 1,
    "an": 1,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
}

MONTH_NAMES: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

WEEKDAY_TERM_TO_WEEKDAY: dict[str, Weekday] = {
    term: weekday for weekday, terms in WEEKDAY_SYNONYMS.items() for term in terms
}

UNIT_TERM_TO_UNIT: dict[str, Unit] = {term: unit for unit, terms in UNIT_SYNONYMS.items() for term in terms}


def build_alternation(phrases: list[str] | tuple[str, ...]) -> str:
    """Build a regex alternation that prefers longer phrases (e.g. "tues" over "tue")."""

    parts = sorted(phrases, key=lambda p: (-len(p), p))
    return "|".join(re.escape(p) for p in parts)


WEEKDAY_PATTERN = build_alternation(list(WEEKDAY_TERM_TO_WEEKDAY))
UNIT_PATTERN = build_alternation(list(UNIT_TERM_TO_UNIT))
NUMBER_WORD_PATTERN = build_alternation(list(NUMBER_WORDS))
MONTH_PATTERN = "|".join(rf"{name[:3]}(?:{re.escape(name[3:])})?" for name in MONTH_NAMES)


def parse_count(token: str) -> int:
    """Parse an offset count ("3", "a", "twelve").

    Raises:
        KeyError: If the token is neither digits nor a known number word.
    """

    if token.isdigit():
        return int(token)
    return NUMBER_WORDS[token]

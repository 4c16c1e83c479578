"""Rule-table phrase classifier (English).

The classifier is intentionally strict and deterministic:
    - every rule is a full-match regex over the normalized phrase plus its own arithmetic strategy,
    - rules are tried in table order and the first match wins, so specific phrases ("next monday")
      come before generic fallbacks (absolute dates),
    - a matched rule whose arithmetic fails raises `UnparseablePhraseError`; nothing is guessed.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

import dateparser
from dateparser.conf import Settings as DateparserSettings
from dateutil.relativedelta import relativedelta

from src.nldates import arithmetic
from src.nldates.dictionaries import (
    CALENDAR_UNITS,
    MONTH_PATTERN,
    NUMBER_WORD_PATTERN,
    UNIT_PATTERN,
    UNIT_TERM_TO_UNIT,
    WEEKDAY_PATTERN,
    WEEKDAY_TERM_TO_WEEKDAY,
    Unit,
    parse_count,
)
from src.nldates.errors import UnparseablePhraseError
from src.nldates.lifecycle import ResolverState
from src.nldates.schema import Weekday

_DATEPARSER_SETTINGS = DateparserSettings().replace(
    PARSERS=["custom-formats", "absolute-time"],
    REQUIRE_PARTS=["day", "month"],
    PREFER_DATES_FROM="current_period",
    # Numeric dates follow the configured order, not the order of whichever language matched.
    PREFER_LOCALE_DATE_ORDER=False,
    RETURN_AS_TIMEZONE_AWARE=False,
)


@dataclass(frozen=True)
class ResolveContext:
    """Everything a rule's arithmetic may depend on."""

    reference: datetime
    week_start: Weekday
    state: ResolverState


RuleResolver = Callable[[re.Match[str], ResolveContext], datetime]


def _always(_match: re.Match[str]) -> bool:
    return True


@dataclass(frozen=True)
class Rule:
    """One entry of the ordered rule table.

    `day_granular` reports whether a match resolves to a whole day (midnight) rather than an exact
    time; only day-granular phrases may be combined with an explicit time ("tomorrow at 3pm").
    """

    name: str
    pattern: re.Pattern[str]
    resolve: RuleResolver
    day_granular: Callable[[re.Match[str]], bool] = field(default=_always)


@dataclass(frozen=True)
class Interpretation:
    """A phrase tagged with the rule that matched it."""

    rule: Rule
    match: re.Match[str]

    @property
    def day_granular(self) -> bool:
        return self.rule.day_granular(self.match)

    def resolve(self, context: ResolveContext) -> datetime:
        return self.rule.resolve(self.match, context)


# ---------------------------------------------------------------------------------------------------
# Keywords

_KEYWORD_OFFSETS: dict[str, int] = {
    "now": 0,
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
    "day after tomorrow": 2,
    "day before yesterday": -2,
}

_KEYWORD_RE = re.compile(
    r"(?:the )?(?P<keyword>day after tomorrow|day before yesterday|today|tomorrow|yesterday|now)"
)


def _resolve_keyword(match: re.Match[str], context: ResolveContext) -> datetime:
    keyword = match.group("keyword")
    if keyword == "now":
        return context.reference
    return arithmetic.offset(context.reference, Unit.day, _KEYWORD_OFFSETS[keyword])


def _keyword_is_day_granular(match: re.Match[str]) -> bool:
    return match.group("keyword") != "now"


# ---------------------------------------------------------------------------------------------------
# "in 3 days" / "2 weeks ago" / "a month from now" / "5 hours"

_RELATIVE_OFFSET_RE = re.compile(
    rf"(?:(?P<lead>in|after) )?(?:(?P<digits>\d+) ?|(?P<word>{NUMBER_WORD_PATTERN}) )"
    rf"(?P<unit>{UNIT_PATTERN})(?: (?P<trail>ago|before|earlier|from now|later|hence))?"
)

_BACKWARD_TRAILS = frozenset({"ago", "before", "earlier"})


def _relative_unit(match: re.Match[str]) -> Unit:
    return UNIT_TERM_TO_UNIT[match.group("unit")]


def _resolve_relative_offset(match: re.Match[str], context: ResolveContext) -> datetime:
    lead, trail = match.group("lead"), match.group("trail")
    backward = trail in _BACKWARD_TRAILS
    if lead and backward:
        raise UnparseablePhraseError("contradictory direction")

    count = parse_count(match.group("digits") or match.group("word"))
    return arithmetic.offset(context.reference, _relative_unit(match), -count if backward else count)


def _relative_offset_is_day_granular(match: re.Match[str]) -> bool:
    return _relative_unit(match) in CALENDAR_UNITS


# ---------------------------------------------------------------------------------------------------
# "next friday" / "last monday" / "this sunday"

_RELATIVE_WEEKDAY_RE = re.compile(
    rf"(?P<direction>next|last|previous|past|coming|this|this coming) (?P<weekday>{WEEKDAY_PATTERN})"
)


def _resolve_relative_weekday(match: re.Match[str], context: ResolveContext) -> datetime:
    weekday = WEEKDAY_TERM_TO_WEEKDAY[match.group("weekday")]
    direction = match.group("direction")
    if direction == "next":
        return arithmetic.next_weekday(context.reference, weekday)
    if direction in ("last", "previous", "past"):
        return arithmetic.previous_weekday(context.reference, weekday)
    return arithmetic.upcoming_weekday(context.reference, weekday)


# ---------------------------------------------------------------------------------------------------
# "next week" / "last month" / "this year"

_WHOLE_UNIT_PATTERN = "day|week|month|year"

_RELATIVE_UNIT_RE = re.compile(rf"(?P<direction>next|last|previous|past) (?P<unit>{_WHOLE_UNIT_PATTERN})")
_THIS_UNIT_RE = re.compile(rf"(?:this|current) (?P<unit>{_WHOLE_UNIT_PATTERN})")


def _resolve_relative_unit(match: re.Match[str], context: ResolveContext) -> datetime:
    unit = Unit(match.group("unit"))
    step = 1 if match.group("direction") == "next" else -1
    start = arithmetic.start_of(context.reference, unit, context.week_start)
    return arithmetic.offset(start, unit, step)


def _resolve_this_unit(match: re.Match[str], context: ResolveContext) -> datetime:
    return arithmetic.start_of(context.reference, Unit(match.group("unit")), context.week_start)


# ---------------------------------------------------------------------------------------------------
# "monday" / "on fri"

_WEEKDAY_RE = re.compile(rf"(?:on )?(?P<weekday>{WEEKDAY_PATTERN})")


def _resolve_weekday(match: re.Match[str], context: ResolveContext) -> datetime:
    return arithmetic.upcoming_weekday(context.reference, WEEKDAY_TERM_TO_WEEKDAY[match.group("weekday")])


# ---------------------------------------------------------------------------------------------------
# "3pm" / "15:30" / "noon"

_TIME_PATTERN = r"noon|midday|midnight|\d{1,2}(?::\d{2})? ?(?:am|pm)|\d{1,2}:\d{2}"

_TIME_RE = re.compile(
    r"(?P<special>noon|midday|midnight)"
    r"|(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))? ?(?P<meridiem>am|pm)"
    r"|(?P<hour24>\d{1,2}):(?P<minute24>\d{2})"
)
_TIME_OF_DAY_RE = re.compile(rf"(?:at |@ ?)?(?P<time>{_TIME_PATTERN})")

_SPECIAL_TIMES: dict[str, tuple[int, int]] = {
    "noon": (12, 0),
    "midday": (12, 0),
    "midnight": (0, 0),
}


def _parse_time(text: str) -> tuple[int, int]:
    """Parse a time fragment into `(hour, minute)` on a 24-hour clock.

    Raises:
        UnparseablePhraseError: If the fragment is not a valid time of day.
    """

    match = _TIME_RE.fullmatch(text)
    if not match:
        raise UnparseablePhraseError(f"not a time: {text!r}")

    if match.group("special"):
        return _SPECIAL_TIMES[match.group("special")]

    if match.group("meridiem"):
        hour = int(match.group("hour"))
        minute = int(match.group("minute") or 0)
        if not 1 <= hour <= 12:
            raise UnparseablePhraseError(f"hour out of range for 12-hour clock: {hour}")
        hour %= 12
        if match.group("meridiem") == "pm":
            hour += 12
    else:
        hour = int(match.group("hour24"))
        minute = int(match.group("minute24"))

    if hour > 23 or minute > 59:
        raise UnparseablePhraseError(f"time out of range: {text!r}")
    return hour, minute


def _resolve_time_of_day(match: re.Match[str], context: ResolveContext) -> datetime:
    hour, minute = _parse_time(match.group("time"))
    return arithmetic.at_time(context.reference, hour, minute)


def _never(_match: re.Match[str]) -> bool:
    return False


# ---------------------------------------------------------------------------------------------------
# Absolute literals: "2024-01-15", "15 jan 2024", "january 15", "01/02/2024"

_ABSOLUTE_RE = re.compile(rf".*(?:\d|\b(?:{MONTH_PATTERN})\b).*")
_HAS_TIME_RE = re.compile(r"\d:\d|\d ?(?:am|pm)\b|\b(?:noon|midnight)\b")
# "5 12" is a guess; a written date needs a month name or a separated numeric date.
_DATE_SHAPE_RE = re.compile(rf"\d ?[/.-] ?\d|\b(?:{MONTH_PATTERN})\b")
_EXPLICIT_YEAR_RE = re.compile(r"\b\d{4}\b")

# Feb 29 recurs at most eight years apart (2096 -> 2104).
_MAX_YEARS_AHEAD = 8


def _parse_written_date(text: str, base: datetime, state: ResolverState) -> datetime | None:
    return dateparser.parse(
        text,
        languages=list(state.languages),
        settings=_DATEPARSER_SETTINGS.replace(DATE_ORDER=state.date_order, RELATIVE_BASE=base),
    )


def _to_reference_zone(value: datetime, reference: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=reference.tzinfo) if reference.tzinfo is not None else value
    if reference.tzinfo is not None:
        return value.astimezone(reference.tzinfo)
    return value.astimezone().replace(tzinfo=None)


def _next_occurrence(text: str, today: datetime, state: ResolverState) -> datetime | None:
    """First year-less match of `text` on or after `today`, moving the base one year at a time."""

    for years in range(1, _MAX_YEARS_AHEAD + 1):
        candidate = _parse_written_date(text, today + relativedelta(years=years), state)
        if candidate is not None and candidate.date() >= today.date():
            return candidate
    return None


def _resolve_absolute(match: re.Match[str], context: ResolveContext) -> datetime:
    text = match.group(0)
    try:
        return _to_reference_zone(datetime.fromisoformat(text), context.reference)
    except ValueError:
        pass

    if not _DATE_SHAPE_RE.search(text):
        raise UnparseablePhraseError(f"ambiguous numeric date: {text!r}")

    today = arithmetic.midnight(context.reference).replace(tzinfo=None)
    parsed = _parse_written_date(text, today, context.state)
    if (parsed is None or parsed.date() < today.date()) and not _EXPLICIT_YEAR_RE.search(text):
        parsed = _next_occurrence(text, today, context.state) or parsed
    if parsed is None:
        raise UnparseablePhraseError(f"not a recognized date: {text!r}")

    if not _HAS_TIME_RE.search(text):
        parsed = arithmetic.midnight(parsed)
    return _to_reference_zone(parsed, context.reference)


# ---------------------------------------------------------------------------------------------------
# "tomorrow at 3pm" / "next friday 09:30" / "2024-01-15 10:00"

_DATED_TIME_RE = re.compile(rf"(?P<date>.+?),?(?: at| @)? (?P<time>{_TIME_PATTERN})")


def _resolve_dated_time(match: re.Match[str], context: ResolveContext) -> datetime:
    interpretation = classify(match.group("date"), rules=DATE_RULES)
    if interpretation is None or not interpretation.day_granular:
        raise UnparseablePhraseError(f"not a calendar day: {match.group('date')!r}")

    hour, minute = _parse_time(match.group("time"))
    return arithmetic.at_time(interpretation.resolve(context), hour, minute)


# ---------------------------------------------------------------------------------------------------
# Rule table

KEYWORD = Rule("keyword", _KEYWORD_RE, _resolve_keyword, _keyword_is_day_granular)
RELATIVE_OFFSET = Rule(
    "relative_offset", _RELATIVE_OFFSET_RE, _resolve_relative_offset, _relative_offset_is_day_granular
)
RELATIVE_WEEKDAY = Rule("relative_weekday", _RELATIVE_WEEKDAY_RE, _resolve_relative_weekday)
RELATIVE_UNIT = Rule("relative_unit", _RELATIVE_UNIT_RE, _resolve_relative_unit)
THIS_UNIT = Rule("this_unit", _THIS_UNIT_RE, _resolve_this_unit)
WEEKDAY = Rule("weekday", _WEEKDAY_RE, _resolve_weekday)
TIME_OF_DAY = Rule("time_of_day", _TIME_OF_DAY_RE, _resolve_time_of_day, _never)
DATED_TIME = Rule("dated_time", _DATED_TIME_RE, _resolve_dated_time, _never)
ABSOLUTE = Rule("absolute", _ABSOLUTE_RE, _resolve_absolute)

# Rules that may precede an explicit time in a "dated_time" phrase.
DATE_RULES: tuple[Rule, ...] = (
    KEYWORD,
    RELATIVE_OFFSET,
    RELATIVE_WEEKDAY,
    RELATIVE_UNIT,
    THIS_UNIT,
    WEEKDAY,
    ABSOLUTE,
)

RULES: tuple[Rule, ...] = (
    KEYWORD,
    RELATIVE_OFFSET,
    RELATIVE_WEEKDAY,
    RELATIVE_UNIT,
    THIS_UNIT,
    WEEKDAY,
    TIME_OF_DAY,
    DATED_TIME,
    ABSOLUTE,
)


def classify(phrase: str, *, rules: tuple[Rule, ...] = RULES) -> Interpretation | None:
    """Match a normalized phrase against `rules` in order; `None` when no rule matches."""

    for rule in rules:
        match = rule.pattern.fullmatch(phrase)
        if match:
            return Interpretation(rule=rule, match=match)
    return None

"""Caller-side formatting of resolved instants.

The resolver returns structured `datetime` values; turning them into text is a separate, swappable
concern. This module implements the moment-style patterns users already know from note-taking apps
(`YYYY-MM-DD`, `HH:mm`, `dddd, MMMM Do`), with month/weekday names localized via babel CLDR data.
Text inside square brackets is emitted verbatim (`[Week of] YYYY-MM-DD`).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime

from babel import Locale
from babel.dates import get_day_names, get_month_names, get_period_names

from src.nldates.lifecycle import parse_locale

INVALID_DATE = "Invalid date"

_TOKEN_RE = re.compile(
    r"\[(?P<literal>[^\]]*)\]"
    r"|(?P<token>YYYY|YY|MMMM|MMM|MM|Do|DD|dddd|ddd|HH|hh|mm|ss|M|D|H|h|m|s|A|a)"
)


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def _hour12(value: datetime) -> int:
    return value.hour % 12 or 12


def _period(value: datetime, locale: Locale) -> str:
    return get_period_names(locale=locale)["pm" if value.hour >= 12 else "am"]


_FORMATTERS: dict[str, Callable[[datetime, Locale], str]] = {
    "YYYY": lambda v, loc: f"{v.year:04d}",
    "YY": lambda v, loc: f"{v.year % 100:02d}",
    "MMMM": lambda v, loc: get_month_names("wide", locale=loc)[v.month],
    "MMM": lambda v, loc: get_month_names("abbreviated", locale=loc)[v.month],
    "MM": lambda v, loc: f"{v.month:02d}",
    "M": lambda v, loc: str(v.month),
    "Do": lambda v, loc: _ordinal(v.day),
    "DD": lambda v, loc: f"{v.day:02d}",
    "D": lambda v, loc: str(v.day),
    "dddd": lambda v, loc: get_day_names("wide", locale=loc)[v.weekday()],
    "ddd": lambda v, loc: get_day_names("abbreviated", locale=loc)[v.weekday()],
    "HH": lambda v, loc: f"{v.hour:02d}",
    "H": lambda v, loc: str(v.hour),
    "hh": lambda v, loc: f"{_hour12(v):02d}",
    "h": lambda v, loc: str(_hour12(v)),
    "mm": lambda v, loc: f"{v.minute:02d}",
    "m": lambda v, loc: str(v.minute),
    "ss": lambda v, loc: f"{v.second:02d}",
    "s": lambda v, loc: str(v.second),
    "A": lambda v, loc: _period(v, loc).upper(),
    "a": lambda v, loc: _period(v, loc).lower(),
}


def format_instant(value: datetime | None, pattern: str, locale: str | Locale | None = None) -> str:
    """Format `value` with a moment-style `pattern`.

    `None` (the unparseable marker) formats as `"Invalid date"`.

    Raises:
        InvalidConfigurationError: If `locale` is unknown.
    """

    if value is None:
        return INVALID_DATE

    loc = parse_locale(locale or "en_US")

    def _replace(match: re.Match[str]) -> str:
        literal = match.group("literal")
        if literal is not None:
            return literal
        return _FORMATTERS[match.group("token")](value, loc)

    return _TOKEN_RE.sub(_replace, pattern)

"""Caller helpers mirroring the note-taking plugin's commands.

These functions combine the resolver with the configured output formats: they are what an editor
integration calls to replace a selected phrase, insert a wiki-link to a daily note, or insert the
current date and time. They hold no state of their own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from babel import Locale

from src.app import App
from src.nldates import lifecycle
from src.nldates.formatting import format_instant
from src.nldates.resolver import resolve

logger = logging.getLogger(__name__)

RenderMode = Literal["replace", "link", "clean", "time"]

_TRUTHY = frozenset({"y", "yes", "1", "t", "true"})


def _current_locale() -> Locale:
    # Same state the resolver reads, so an `initialize(replace=True)` after `create_app` applies to both.
    return lifecycle.current_state().locale


@dataclass(frozen=True)
class NLDResult:
    """A resolved date plus its formatted text (`"Invalid date"` when unparseable)."""

    formatted_string: str
    date: datetime | None

    @property
    def is_valid(self) -> bool:
        return self.date is not None


def parse(app: App, phrase: str, fmt: str, reference: datetime | None = None) -> NLDResult:
    """Resolve `phrase` with the configured week start and format it with `fmt`."""

    result = resolve(phrase, reference=reference, week_start=app.settings.week_start)
    formatted = format_instant(result.value, fmt, _current_locale())
    if not result.is_valid:
        logger.debug("input date %r can't be parsed", phrase)
    return NLDResult(formatted_string=formatted, date=result.value)


def parse_date(app: App, phrase: str, reference: datetime | None = None) -> NLDResult:
    return parse(app, phrase, app.settings.date_format, reference)


def parse_time(app: App, phrase: str, reference: datetime | None = None) -> NLDResult:
    return parse(app, phrase, app.settings.time_format, reference)


def render(app: App, phrase: str, mode: RenderMode, reference: datetime | None = None) -> str | None:
    """Produce the replacement text for a selected phrase.

    Modes:
        - `replace`: formatted date, wrapped in `[[...]]` when `settings.link_dates` is on.
        - `link`: formatted date, always wrapped in `[[...]]`.
        - `clean`: formatted date, never wrapped.
        - `time`: formatted time.

    Returns:
        The replacement text, or `None` when the phrase is unparseable.
    """

    if mode == "time":
        result = parse_time(app, phrase, reference)
    else:
        result = parse_date(app, phrase, reference)
    if not result.is_valid:
        return None

    text = result.formatted_string
    if mode == "link" or (mode == "replace" and app.settings.link_dates):
        return f"[[{text}]]"
    return text


def current_date_text(app: App, now: datetime | None = None) -> str:
    return format_instant(now or datetime.now(), app.settings.date_format, _current_locale())


def current_time_text(app: App, now: datetime | None = None) -> str:
    return format_instant(now or datetime.now(), app.settings.time_format, _current_locale())


def now_text(app: App, now: datetime | None = None) -> str:
    """Current date and time joined by the configured separator."""

    now = now or datetime.now()
    return f"{current_date_text(app, now)}{app.settings.separator}{current_time_text(app, now)}"


def parse_truthy(value: str) -> bool:
    """Interpret loose boolean flags from URLs/arguments ("yes", "1", "true")."""

    return value.strip().lower() in _TRUTHY

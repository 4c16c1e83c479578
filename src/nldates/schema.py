"""Resolver data model (Pydantic models and enums).

These types are the contract between the resolver and its callers. A `ParseResult` either carries a
resolved instant or is the explicit unparseable marker (`value is None`); callers never receive a
best-guess date.
"""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum, StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

DateOrder = Literal["MDY", "DMY", "YMD"]


class WeekStartPolicy(StrEnum):
    """Configured first day of the week."""

    sunday = "sunday"
    monday = "monday"
    tuesday = "tuesday"
    wednesday = "wednesday"
    thursday = "thursday"
    friday = "friday"
    saturday = "saturday"
    locale_default = "locale-default"


class Weekday(IntEnum):
    """Concrete weekday, numbered like `datetime.weekday()` (Monday is 0)."""

    monday = 0
    tuesday = 1
    wednesday = 2
    thursday = 3
    friday = 4
    saturday = 5
    sunday = 6


class ParseRequest(BaseModel):
    """A single resolution request.

    `reference` defaults to the wall-clock time at resolution time when omitted.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    phrase: str
    reference: datetime | None = None
    week_start: WeekStartPolicy = WeekStartPolicy.locale_default


class ParseResult(BaseModel):
    """Outcome of resolving one phrase."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    phrase: str
    value: datetime | None = None
    rule: str | None = None

    @model_validator(mode="after")
    def validate_marker(self) -> ParseResult:
        """A resolved value always names the rule that produced it, and vice versa."""

        if (self.value is None) != (self.rule is None):
            raise ValueError("value and rule must both be set or both be null")
        return self

    @property
    def is_valid(self) -> bool:
        return self.value is not None

    @classmethod
    def unparseable(cls, phrase: str) -> ParseResult:
        """Build the explicit unparseable marker for `phrase`."""

        return cls(phrase=phrase)


class LocaleConfig(BaseModel):
    """Locale settings applied once at resolver initialization."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    locale: str = "en_US"
    date_order: DateOrder | None = None

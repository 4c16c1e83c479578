"""Tests for week-start policy resolution."""

from __future__ import annotations

import pytest

from src.nldates import lifecycle, week_start
from src.nldates.errors import InvalidConfigurationError
from src.nldates.schema import Weekday, WeekStartPolicy
from src.nldates.week_start import coerce_policy, resolve_week_start


def test_concrete_policies_map_directly() -> None:
    assert resolve_week_start(WeekStartPolicy.monday) == Weekday.monday
    assert resolve_week_start("saturday") == Weekday.saturday
    assert resolve_week_start("Sunday", locale_hint="de_DE") == Weekday.sunday


@pytest.mark.parametrize(
    ("locale_hint", "expected"),
    [
        ("en_US", Weekday.sunday),
        ("en-US", Weekday.sunday),
        ("de_DE", Weekday.monday),
        ("en-GB", Weekday.monday),
    ],
)
def test_locale_default_uses_hint(locale_hint: str, expected: Weekday) -> None:
    assert resolve_week_start(WeekStartPolicy.locale_default, locale_hint) == expected


def test_locale_default_falls_back_to_initialized_locale() -> None:
    assert resolve_week_start("locale-default") == Weekday.sunday


def test_locale_default_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    lifecycle.teardown()
    monkeypatch.setattr(week_start, "default_locale", lambda: "de_DE")
    assert resolve_week_start("locale-default") == Weekday.monday

    monkeypatch.setattr(week_start, "default_locale", lambda: None)
    assert resolve_week_start("locale-default") == Weekday.sunday


def test_coerce_policy() -> None:
    assert coerce_policy(" Locale-Default ") is WeekStartPolicy.locale_default
    assert coerce_policy(WeekStartPolicy.friday) is WeekStartPolicy.friday


def test_unknown_policy_is_rejected() -> None:
    with pytest.raises(InvalidConfigurationError):
        resolve_week_start("funday")


def test_unknown_locale_hint_is_rejected() -> None:
    with pytest.raises(InvalidConfigurationError):
        resolve_week_start("locale-default", locale_hint="zz_QQ")

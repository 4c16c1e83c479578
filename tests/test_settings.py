"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from src.config.settings import DEFAULT_DATE_FORMAT, Settings, load_settings
from src.nldates.errors import InvalidConfigurationError
from src.nldates.schema import LocaleConfig, WeekStartPolicy

_ENV_VARS = (
    "NLDATES_DATE_FORMAT",
    "NLDATES_TIME_FORMAT",
    "NLDATES_SEPARATOR",
    "NLDATES_WEEK_START",
    "NLDATES_LOCALE",
    "NLDATES_DATE_ORDER",
    "NLDATES_LINK_DATES",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.date_format == "YYYY-MM-DD"
    assert settings.time_format == "HH:mm"
    assert settings.separator == " "
    assert settings.week_start == WeekStartPolicy.locale_default
    assert settings.locale == "en_US"
    assert settings.link_dates is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NLDATES_WEEK_START", "Monday")
    monkeypatch.setenv("NLDATES_LOCALE", "en-GB")
    monkeypatch.setenv("NLDATES_DATE_ORDER", "YMD")
    monkeypatch.setenv("NLDATES_LINK_DATES", "false")

    settings = load_settings()

    assert settings.week_start == WeekStartPolicy.monday
    assert settings.locale == "en_GB"
    assert settings.link_dates is False
    assert settings.locale_config() == LocaleConfig(locale="en_GB", date_order="YMD")


def test_empty_format_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NLDATES_DATE_FORMAT", "")
    assert load_settings().date_format == DEFAULT_DATE_FORMAT


def test_unknown_week_start_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NLDATES_WEEK_START", "funday")
    with pytest.raises(InvalidConfigurationError):
        load_settings()


def test_unknown_locale_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NLDATES_LOCALE", "zz_QQ")
    with pytest.raises(InvalidConfigurationError):
        load_settings()


def test_settings_by_field_name() -> None:
    settings = Settings(week_start="sunday", separator=" | ")
    assert settings.week_start == WeekStartPolicy.sunday
    assert settings.separator == " | "

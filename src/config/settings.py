"""Environment configuration and validation.

This module defines strongly-typed settings loaded from environment variables (optionally via a local
`.env` file): output formats for callers, the week-start policy, and the resolver locale.

Unknown week-start policies or locales are rejected at startup instead of silently falling back to a
default, so integration mistakes surface early.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.nldates.errors import InvalidConfigurationError
from src.nldates.lifecycle import parse_locale
from src.nldates.schema import DateOrder, LocaleConfig, WeekStartPolicy

DEFAULT_DATE_FORMAT = "YYYY-MM-DD"
DEFAULT_TIME_FORMAT = "HH:mm"


class Settings(BaseSettings):
    """Resolver settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    date_format: str = Field(default=DEFAULT_DATE_FORMAT, alias="NLDATES_DATE_FORMAT")
    time_format: str = Field(default=DEFAULT_TIME_FORMAT, alias="NLDATES_TIME_FORMAT")
    separator: str = Field(default=" ", alias="NLDATES_SEPARATOR")
    week_start: WeekStartPolicy = Field(default=WeekStartPolicy.locale_default, alias="NLDATES_WEEK_START")
    locale: str = Field(default="en_US", alias="NLDATES_LOCALE")
    date_order: DateOrder | None = Field(default=None, alias="NLDATES_DATE_ORDER")
    link_dates: bool = Field(default=True, alias="NLDATES_LINK_DATES")

    @field_validator("date_format")
    @classmethod
    def default_empty_date_format(cls, value: str) -> str:
        """An empty date format means the default one."""

        return value or DEFAULT_DATE_FORMAT

    @field_validator("time_format")
    @classmethod
    def default_empty_time_format(cls, value: str) -> str:
        """An empty time format means the default one."""

        return value or DEFAULT_TIME_FORMAT

    @field_validator("week_start", mode="before")
    @classmethod
    def normalize_week_start(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, value: str) -> str:
        """Validate that the locale is known to CLDR (`en_US`, `en-GB`, `de`)."""

        try:
            return str(parse_locale(value))
        except InvalidConfigurationError as exc:
            raise ValueError(str(exc)) from exc

    def locale_config(self) -> LocaleConfig:
        """Locale settings for `lifecycle.initialize()`."""

        return LocaleConfig(locale=self.locale, date_order=self.date_order)


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        InvalidConfigurationError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        # The CLI maps this to its configuration exit code.
        raise InvalidConfigurationError(f"Invalid environment configuration: {exc}") from exc

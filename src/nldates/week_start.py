"""Week-start policy resolution.

Arithmetic never sees the symbolic `locale-default` policy: it is resolved to a concrete weekday here,
using CLDR week data from babel.
"""

from __future__ import annotations

from babel import Locale, default_locale

from src.nldates import lifecycle
from src.nldates.errors import InvalidConfigurationError
from src.nldates.schema import Weekday, WeekStartPolicy

_FALLBACK_LOCALE = "en_US"


def coerce_policy(value: WeekStartPolicy | str) -> WeekStartPolicy:
    """Validate a raw week-start value ("monday", "Locale-Default", ...).

    Raises:
        InvalidConfigurationError: If the value names no known policy.
    """

    if isinstance(value, WeekStartPolicy):
        return value
    try:
        return WeekStartPolicy(str(value).strip().lower())
    except ValueError as exc:
        raise InvalidConfigurationError(f"unknown week-start policy: {value!r}") from exc


def _environment_locale() -> Locale:
    # `default_locale()` reads LANGUAGE/LC_ALL/LC_CTYPE/LANG and may return None.
    try:
        return lifecycle.parse_locale(default_locale() or _FALLBACK_LOCALE)
    except InvalidConfigurationError:
        return lifecycle.parse_locale(_FALLBACK_LOCALE)


def resolve_week_start(
        policy: WeekStartPolicy | str,
        locale_hint: str | Locale | None = None,
) -> Weekday:
    """Resolve a week-start policy to a concrete weekday.

    For `locale-default`, the locale is taken from (in order): `locale_hint`, the initialized resolver
    state, the process environment, and finally `en_US`.

    Raises:
        InvalidConfigurationError: If the policy or the locale hint is unknown.
    """

    policy = coerce_policy(policy)
    if policy is not WeekStartPolicy.locale_default:
        return Weekday[policy.name]

    if locale_hint is not None:
        return Weekday(lifecycle.parse_locale(locale_hint).first_week_day)
    if lifecycle.is_initialized():
        return lifecycle.current_state().default_week_start
    return Weekday(_environment_locale().first_week_day)

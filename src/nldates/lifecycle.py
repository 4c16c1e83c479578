"""Process-wide resolver initialization.

Locale data (babel CLDR data and dateparser language data) is loaded once and published as an
immutable `ResolverState`. Resolution calls only read the current state, so they need no coordination;
replacing the state (e.g. on a locale change) is an explicit, atomic swap.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from babel import Locale, UnknownLocaleError
from dateparser.date import DateDataParser

from src.nldates.errors import AlreadyInitializedError, InvalidConfigurationError, NotInitializedError
from src.nldates.schema import DateOrder, LocaleConfig, Weekday

logger = logging.getLogger(__name__)

_FALLBACK_DATE_ORDER: DateOrder = "MDY"


@dataclass(frozen=True)
class ResolverState:
    """Read-only locale data shared by all resolution calls."""

    locale: Locale
    locale_tag: str
    date_order: DateOrder
    languages: tuple[str, ...]
    default_week_start: Weekday


_lock = threading.Lock()
_state: ResolverState | None = None


def parse_locale(tag: str | Locale) -> Locale:
    """Parse a locale tag (`en_US`, `en-GB`, `de`) into a babel `Locale`.

    Raises:
        InvalidConfigurationError: If the tag is empty or unknown to CLDR.
    """

    if isinstance(tag, Locale):
        return tag

    value = (tag or "").strip().replace("-", "_")
    if not value:
        raise InvalidConfigurationError("locale must not be empty")
    try:
        return Locale.parse(value)
    except (UnknownLocaleError, ValueError) as exc:
        raise InvalidConfigurationError(f"unknown locale: {tag!r}") from exc


def date_order_for(locale: Locale) -> DateOrder:
    """Derive the numeric date order from the locale's CLDR short date pattern ("M/d/yy" -> MDY)."""

    pattern = locale.date_formats["short"].pattern
    positions = {field: pattern.find(field) for field in ("y", "M", "d")}
    if any(pos < 0 for pos in positions.values()):
        return _FALLBACK_DATE_ORDER

    order = "".join(sorted(positions, key=positions.__getitem__)).upper()
    if order in ("MDY", "DMY", "YMD"):
        return order  # type: ignore[return-value]
    return _FALLBACK_DATE_ORDER


def _build_state(config: LocaleConfig) -> ResolverState:
    locale = parse_locale(config.locale)

    languages = tuple(dict.fromkeys((locale.language, "en")))
    try:
        # Loads the language data up-front and rejects languages dateparser does not ship.
        DateDataParser(languages=list(languages))
    except ValueError as exc:
        raise InvalidConfigurationError(f"unsupported language for locale {config.locale!r}") from exc

    return ResolverState(
        locale=locale,
        locale_tag=str(locale),
        date_order=config.date_order or date_order_for(locale),
        languages=languages,
        default_week_start=Weekday(locale.first_week_day),
    )


def initialize(config: LocaleConfig | None = None, *, replace: bool = False) -> ResolverState:
    """Initialize the resolver for `config` (defaults to `en_US`).

    Raises:
        AlreadyInitializedError: If already initialized and `replace` is false.
        InvalidConfigurationError: If the locale is unknown or unsupported.
    """

    global _state

    config = config or LocaleConfig()
    with _lock:
        if _state is not None and not replace:
            raise AlreadyInitializedError("resolver is already initialized; pass replace=True to swap")

        # Build before publishing so a failed re-initialization keeps the previous state.
        new_state = _build_state(config)
        previous = _state
        _state = new_state

    if previous is None:
        logger.info(
            "resolver initialized locale=%s date_order=%s week_start=%s",
            new_state.locale_tag,
            new_state.date_order,
            new_state.default_week_start.name,
        )
    else:
        logger.info("resolver locale replaced old=%s new=%s", previous.locale_tag, new_state.locale_tag)
    return new_state


def teardown() -> None:
    """Drop the process-wide state; `resolve()` fails fast until the next `initialize()`."""

    global _state

    with _lock:
        _state = None
    logger.info("resolver torn down")


def is_initialized() -> bool:
    return _state is not None


def current_state() -> ResolverState:
    """Return the published state.

    Raises:
        NotInitializedError: If `initialize()` has not completed.
    """

    state = _state
    if state is None:
        raise NotInitializedError("resolver used before initialize()")
    return state

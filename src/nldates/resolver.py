"""Resolver entry points.

Contract: every call returns a `ParseResult`. Unrecognized phrases and arithmetic that would leave the
Gregorian calendar collapse to the unparseable marker; only configuration and lifecycle errors are
raised, because those are integration bugs rather than user input.
"""

from __future__ import annotations

import logging
from datetime import datetime

from src.nldates import lifecycle
from src.nldates.errors import UnparseablePhraseError
from src.nldates.normalize import normalize_phrase
from src.nldates.rules import ResolveContext, classify
from src.nldates.schema import ParseRequest, ParseResult, WeekStartPolicy
from src.nldates.week_start import coerce_policy, resolve_week_start

logger = logging.getLogger(__name__)


def resolve(
        phrase: str,
        reference: datetime | None = None,
        week_start: WeekStartPolicy | str = WeekStartPolicy.locale_default,
) -> ParseResult:
    """Resolve a natural-language phrase against `reference` (defaults to now).

    Raises:
        NotInitializedError: If `lifecycle.initialize()` has not run.
        InvalidConfigurationError: If `week_start` is not a known policy.
    """

    state = lifecycle.current_state()
    policy = coerce_policy(week_start)
    context = ResolveContext(
        reference=reference if reference is not None else datetime.now(),
        week_start=resolve_week_start(policy, state.locale),
        state=state,
    )

    normalized = normalize_phrase(phrase)
    interpretation = classify(normalized) if normalized else None
    if interpretation is None:
        logger.debug("unparseable phrase=%r reason=no matching rule", phrase)
        return ParseResult.unparseable(phrase)

    try:
        value = interpretation.resolve(context)
    except (UnparseablePhraseError, ValueError, OverflowError) as exc:
        logger.debug("unparseable phrase=%r rule=%s reason=%s", phrase, interpretation.rule.name, exc)
        return ParseResult.unparseable(phrase)

    return ParseResult(phrase=phrase, value=value, rule=interpretation.rule.name)


def resolve_request(request: ParseRequest) -> ParseResult:
    """Resolve a validated `ParseRequest` (convenience wrapper)."""

    return resolve(request.phrase, reference=request.reference, week_start=request.week_start)

"""Resolver error taxonomy."""

from __future__ import annotations


class NLDatesError(Exception):
    """Base class for all resolver errors."""


class UnparseablePhraseError(NLDatesError, ValueError):
    """Raised internally when a phrase matches no rule or resolves to an invalid date.

    `resolve()` never lets this escape; it is converted to the unparseable `ParseResult` marker.
    """


class NotInitializedError(NLDatesError, RuntimeError):
    """Raised when the resolver is used before `lifecycle.initialize()` has completed."""


class AlreadyInitializedError(NLDatesError, RuntimeError):
    """Raised when `initialize()` is called twice without an explicit `replace=True`."""


class InvalidConfigurationError(NLDatesError, ValueError):
    """Raised for unknown week-start policies, locales, or invalid environment configuration."""

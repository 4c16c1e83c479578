"""Application composition root.

This module wires together configuration and the process-wide resolver state for callers.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.config.settings import Settings
from src.nldates import lifecycle
from src.nldates.lifecycle import ResolverState


@dataclass(frozen=True)
class App:
    """Shared dependencies for command helpers.

    `state` is what `create_app` published. Command helpers resolve and format with the live state, so
    a later `lifecycle.initialize(replace=True)` takes effect without rebuilding the `App`.
    """

    settings: Settings
    state: ResolverState


def create_app(settings: Settings, *, replace: bool = False) -> App:
    """Create the application container and initialize the resolver for `settings.locale`.

    Note:
        Initialization is process-wide. Pass `replace=True` to swap an existing state (e.g. after the
        locale setting changed).
    """

    state = lifecycle.initialize(settings.locale_config(), replace=replace)
    return App(settings=settings, state=state)

"""Logging configuration for the resolver process."""

from __future__ import annotations

import logging
import os
import sys

# Libraries that log per parse attempt; the resolver's own DEBUG lines already say why a phrase failed.
_CHATTY_LOGGERS = ("dateparser", "tzlocal", "babel")


def configure_logging(level: str | None = None) -> None:
    """Send resolver logs to stderr.

    Rejected phrases are logged at DEBUG by `src.nldates.resolver` together with the rule that matched
    and the reason, so `LOG_LEVEL=DEBUG` explains an `Invalid date`. Locale initialization and
    replacement are logged at INFO. Stdout stays reserved for the CLI's formatted result.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

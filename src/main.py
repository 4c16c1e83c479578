"""Command-line entrypoint: resolve a phrase and print the formatted result.

Usage:
    python -m src.main next friday
    python -m src.main --week-start monday --format "dddd, MMMM Do" next week
    python -m src.main --time "in 2 hours"
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import datetime

from src.app import create_app
from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.nldates import commands
from src.nldates.errors import InvalidConfigurationError
from src.nldates.formatting import INVALID_DATE
from src.nldates.week_start import coerce_policy

logger = logging.getLogger(__name__)

EXIT_UNPARSEABLE = 1
EXIT_CONFIG = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nldates", description="Resolve a natural-language date.")
    parser.add_argument("phrase", nargs="+", help="phrase to resolve, e.g. 'next friday'")
    parser.add_argument("--reference", type=datetime.fromisoformat, help="ISO reference instant")
    parser.add_argument("--week-start", help="sunday..saturday or locale-default")
    parser.add_argument("--format", dest="fmt", help="moment-style output pattern")
    parser.add_argument("--time", action="store_true", help="use the configured time format")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""

    args = _build_parser().parse_args(argv)
    configure_logging()

    try:
        settings = load_settings()
        if args.week_start:
            settings = settings.model_copy(update={"week_start": coerce_policy(args.week_start)})
        app = create_app(settings, replace=True)
    except InvalidConfigurationError as exc:
        logger.error("invalid configuration: %s", exc)
        return EXIT_CONFIG

    phrase = " ".join(args.phrase)
    fmt = args.fmt or (settings.time_format if args.time else settings.date_format)
    result = commands.parse(app, phrase, fmt, reference=args.reference)
    if not result.is_valid:
        print(INVALID_DATE, file=sys.stderr)
        return EXIT_UNPARSEABLE

    print(result.formatted_string)
    return 0


if __name__ == "__main__":
    sys.exit(main())

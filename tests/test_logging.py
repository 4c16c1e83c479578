"""Tests for logging setup and the resolver's diagnostic log lines."""

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from src.config.logging import configure_logging
from src.nldates.resolver import resolve


def test_configure_logging_quiets_parser_libraries() -> None:
    configure_logging("debug")

    assert logging.getLogger("dateparser").level == logging.WARNING
    assert logging.getLogger("babel").level == logging.WARNING


def test_rejected_phrase_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="src.nldates.resolver"):
        resolve("5 12", reference=datetime(2024, 6, 12))

    records = [record for record in caplog.records if record.name == "src.nldates.resolver"]
    assert records
    assert records[0].levelno == logging.DEBUG
    assert "rule=absolute" in records[0].getMessage()

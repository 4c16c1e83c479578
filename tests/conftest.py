"""Pytest configuration.

The repository uses a flat `src/` layout without an installed package. This conftest ensures tests
can import from the `src.*` namespace when running `pytest` locally, and gives every test a freshly
initialized resolver.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from src.nldates import lifecycle  # noqa: E402
from src.nldates.schema import LocaleConfig  # noqa: E402


@pytest.fixture(autouse=True)
def resolver_state() -> Iterator[lifecycle.ResolverState]:
    """Initialize the resolver for `en_US` around each test."""

    lifecycle.teardown()
    state = lifecycle.initialize(LocaleConfig(locale="en_US"))
    yield state
    lifecycle.teardown()

"""Phrase normalization for deterministic rule matching."""

from __future__ import annotations

import re

_MULTISPACE_RE = re.compile(r"\s+")
_WRAPPING_QUOTES = "\"'`“”‘’"
_TRAILING_PUNCTUATION = ".!?,;"


def normalize_phrase(text: str) -> str:
    """Normalize a raw phrase for the rule table.

    Normalization is intentionally conservative:
        - Trim and lowercase.
        - Strip wrapping quotes/backticks and trailing sentence punctuation.
        - Collapse whitespace.

    Separators inside the phrase (`-`, `/`, `:`, `.`) are kept because absolute dates and times need
    them.
    """

    value = (text or "").strip().lower()

    # Normalize common unicode dashes to ASCII hyphen.
    value = value.replace("—", "-").replace("–", "-")

    value = value.strip(_WRAPPING_QUOTES).strip()
    value = value.rstrip(_TRAILING_PUNCTUATION).strip()
    value = _MULTISPACE_RE.sub(" ", value)
    return value

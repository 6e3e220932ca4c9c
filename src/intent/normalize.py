"""Text normalization and tokenization for keyword intent parsing."""

from __future__ import annotations

import re

# Anything that is not an ASCII word character, whitespace or Devanagari becomes a separator.
_NON_TOKEN_RE = re.compile(r"[^A-Za-z0-9_\s\u0900-\u097F]")
_WHITESPACE_RE = re.compile(r"\s+")

MIN_TOKEN_LENGTH = 2


def normalize_text(text: str) -> str:
    """Lowercase the raw input for substring (phrase) matching.

    Devanagari has no case, so Hindi text passes through unchanged.
    """

    return (text or "").lower()


def tokenize(text: str) -> list[str]:
    """Split user text into matchable tokens.

    Order and duplicates are preserved; single-character tokens are dropped.
    """

    value = _NON_TOKEN_RE.sub(" ", normalize_text(text))
    return [token for token in _WHITESPACE_RE.split(value) if len(token) >= MIN_TOKEN_LENGTH]

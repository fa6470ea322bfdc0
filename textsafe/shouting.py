"""Excessive capitalization heuristics."""

from __future__ import annotations

import unicodedata

SHOUTING_MIN_LENGTH = 5
SHOUTING_WINDOW = 80

_CASE_WEIGHT = {"Lu": 1, "Ll": -1}


def _case_score(text: str) -> int:
    return sum(_CASE_WEIGHT.get(unicodedata.category(ch), 0) for ch in text)


def is_shouting(text: str) -> bool:
    """Return True if uppercase letters outnumber lowercase ones.

    Only the first ``SHOUTING_WINDOW`` characters are inspected; uncased
    characters (digits, punctuation, CJK, ...) do not count either way.
    """

    if len(text) < SHOUTING_MIN_LENGTH:
        return False
    return _case_score(text[:SHOUTING_WINDOW]) > 0


def no_shouting(text: str) -> str:
    return text.lower() if is_shouting(text) else text

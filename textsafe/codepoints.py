"""codepoints

Classification of "garbage" codepoints: invisible, bidi, decorative and
phonetic characters that disrupt rendering of user-submitted text.

Public API (stable):
- GARBAGE_RANGES
- is_garbage_char
- has_garbage_chars
- distinct_garbage_chars
- distinct_garbage_codepoints
- remove_garbage_chars

Notes:
- The classifier is a pure interval lookup over ``GARBAGE_RANGES``.
- Mathematical operators (U+2200-U+22FF) are deliberately kept.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import FrozenSet, Tuple, Union

CodepointRange = Tuple[int, int]

# Inclusive (start, end) pairs, sorted by start and non-overlapping.
GARBAGE_RANGES: Tuple[CodepointRange, ...] = (
    (0x0250, 0x02AF),  # IPA extensions
    (0x06D6, 0x06FF),  # quranic annotation marks ۞ ۩
    (0x1D00, 0x1D7F),  # phonetic extensions
    (0x2000, 0x200F),  # invisible spaces and marks
    (0x2028, 0x202F),  # line/paragraph separators, bidi embeddings
    (0x2100, 0x21FF),  # letterlike symbols, number forms, arrows
    (0x2300, 0x2C5F),  # technical, dingbats, box drawing ... glagolitic
    (0x534D, 0x534D),  # 卍
    (0x5350, 0x5350),  # 卐
    (0xA9C1, 0xA9C2),  # ꧁ ꧂
)

_RANGE_STARTS: Tuple[int, ...] = tuple(start for start, _ in GARBAGE_RANGES)


def _codepoint(c: Union[int, str]) -> int:
    return ord(c) if isinstance(c, str) else c


def is_garbage_char(c: Union[int, str]) -> bool:
    """Return True if ``c`` (a codepoint or single character) is garbage."""

    cp = _codepoint(c)
    idx = bisect_right(_RANGE_STARTS, cp) - 1
    if idx < 0:
        return False
    return cp <= GARBAGE_RANGES[idx][1]


def has_garbage_chars(text: str) -> bool:
    return any(is_garbage_char(ch) for ch in text)


def distinct_garbage_chars(text: str) -> FrozenSet[str]:
    """Return the set of distinct garbage characters found in ``text``."""

    return frozenset(ch for ch in text if is_garbage_char(ch))


def distinct_garbage_codepoints(text: str) -> FrozenSet[int]:
    return frozenset(map(ord, distinct_garbage_chars(text)))


def remove_garbage_chars(text: str) -> str:
    """Drop garbage characters, keeping the relative order of the rest."""

    return "".join(ch for ch in text if not is_garbage_char(ch))

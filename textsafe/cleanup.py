"""cleanup

Display normalization and slug generation.

Public API (stable):
- pipe
- trim
- normalize
- remove_multibyte_symbols
- full_clean_up
- slugify
- repair_mojibake
- lcfirst
- shorten

Notes:
- ``full_clean_up`` order is fixed: trim, normalize, remove garbage, strip
  symbols. Normalization can create or resolve garbage codepoints, so it runs
  before the garbage filter.
- Display text targets NFKC; slugs target NFD so diacritics can be dropped.
"""

from __future__ import annotations

import logging
import re
import sys
import unicodedata
from functools import lru_cache
from itertools import groupby
from typing import Callable, Iterator, List, Tuple, TypeVar

import ftfy

from textsafe.codepoints import remove_garbage_chars

logger = logging.getLogger(__name__)

T = TypeVar("T")


def pipe(value: T, *funcs: Callable[[T], T]) -> T:
    """Left-to-right function composition for a single value."""
    for fn in funcs:
        value = fn(value)
    return value


# ---------------------------------------------------------------------------
# Ordinal-preserving NFKC
# ---------------------------------------------------------------------------

# C0 controls: untouched by NFKC and never produced by it.
ORDINAL_SENTINEL = "\u0001"
FEMININE_ORDINAL_SENTINEL = "\u0002"

_ORDINAL_RE = re.compile("[º°ª]")
_TO_SENTINEL = {"º": ORDINAL_SENTINEL, "°": ORDINAL_SENTINEL, "ª": FEMININE_ORDINAL_SENTINEL}
_FROM_SENTINEL = str.maketrans({ORDINAL_SENTINEL: "º", FEMININE_ORDINAL_SENTINEL: "ª"})


def normalize(text: str) -> str:
    """Fold compatibility characters into letters when possible, but keep
    ordinal indicators (``º``, ``°`` become ``º``; ``ª`` stays ``ª``)."""

    shielded = _ORDINAL_RE.sub(lambda m: _TO_SENTINEL[m.group(0)], text)
    return unicodedata.normalize("NFKC", shielded).translate(_FROM_SENTINEL)


# ---------------------------------------------------------------------------
# "Other Symbol" stripping
# ---------------------------------------------------------------------------


def _category_runs(category: str) -> Iterator[Tuple[int, int]]:
    """Yield inclusive codepoint ranges whose general category is ``category``."""

    members = (cp for cp in range(sys.maxunicode + 1) if unicodedata.category(chr(cp)) == category)
    # consecutive codepoints share the same (cp - index) key
    for _, group in groupby(enumerate(members), key=lambda pair: pair[1] - pair[0]):
        run: List[int] = [cp for _, cp in group]
        yield run[0], run[-1]


def _char_class(ranges: Iterator[Tuple[int, int]]) -> str:
    parts = (
        re.escape(chr(lo)) if lo == hi else f"{re.escape(chr(lo))}-{re.escape(chr(hi))}"
        for lo, hi in ranges
    )
    return "[" + "".join(parts) + "]"


@lru_cache(maxsize=None)
def _symbol_pattern() -> re.Pattern[str]:
    """``\\p{So}+`` for the stdlib ``re`` engine, built once per process."""

    pattern = re.compile(_char_class(_category_runs("So")) + "+")
    logger.debug("compiled So pattern with %d characters", len(pattern.pattern))
    return pattern


def remove_multibyte_symbols(text: str) -> str:
    """Remove runs of pictographic/decorative symbols (category ``So``)."""
    return _symbol_pattern().sub("", text)


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


# C0 controls and space (the classic "<= U+0020" trim) plus Unicode whitespace.
_TRIM_CHARS = "".join(chr(cp) for cp in range(0x3001) if cp <= 0x20 or chr(cp).isspace())


def trim(text: str) -> str:
    """Strip leading/trailing control characters and whitespace."""
    return text.strip(_TRIM_CHARS)


def full_clean_up(text: str) -> str:
    return pipe(text, trim, normalize, remove_garbage_chars, remove_multibyte_symbols)


def repair_mojibake(text: str) -> str:
    """Undo UTF-8 text that was decoded with a legacy codec (``Ã©`` -> ``é``)."""
    return ftfy.fix_encoding(text)


# ---------------------------------------------------------------------------
# Slugs
# ---------------------------------------------------------------------------

_SLUG_MULTI_DASH = re.compile(r"-{2,}")
_SLUG_DISALLOWED = re.compile(r"[^\w-]", re.ASCII)


def slugify(text: str) -> str:
    """Return a lowercase, hyphenated, ASCII identifier; may be empty."""

    no_whitespace = trim(text).replace(" ", "-")
    single_dashes = _SLUG_MULTI_DASH.sub("-", no_whitespace)
    decomposed = unicodedata.normalize("NFD", single_dashes)
    return _SLUG_DISALLOWED.sub("", decomposed).lower()


# ---------------------------------------------------------------------------
# Small helpers
# ---------------------------------------------------------------------------


def lcfirst(text: str) -> str:
    return text[:1].lower() + text[1:]


def _oneline(text: str) -> str:
    return text.replace("\n", " ")


def shorten(text: str, length: int, sep: str = "…") -> str:
    """Flatten newlines and cut ``text`` to ``length`` characters plus ``sep``.

    Text that would only save a few characters by truncation is kept whole.
    """

    if len(text) > length + len(sep):
        return _oneline(text[:length]) + sep
    return _oneline(text)

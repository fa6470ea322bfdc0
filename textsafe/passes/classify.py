"""Classification pass: records flags in ``meta['metrics']['classify']``.

The payload is never modified. ``options.classify.checks`` selects which
classifiers run (all of them by default).
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping

from textsafe.codepoints import has_garbage_chars
from textsafe.framework import Artifact, register
from textsafe.passes._text_pass import pass_options, with_metrics
from textsafe.prize import looks_like_prize
from textsafe.rich_text import has_links
from textsafe.shouting import is_shouting

logger = logging.getLogger(__name__)

CHECKS: Mapping[str, Callable[[str], bool]] = {
    "shouting": is_shouting,
    "prize": looks_like_prize,
    "garbage": has_garbage_chars,
    "links": has_links,
}


def classify_text(text: str, checks: tuple[str, ...] = tuple(CHECKS)) -> Dict[str, bool]:
    """Run the named classifiers over ``text``; unknown names raise ``KeyError``."""
    return {name: CHECKS[name](text) for name in checks}


class _ClassifyPass:
    """Record shouting, prize, garbage and link flags; payload unchanged."""

    name = "classify"

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, str):
            return a
        checks = tuple(pass_options(a, self.name).get("checks") or CHECKS)
        flags = classify_text(a.payload, checks)
        logger.debug("classify: %s", flags)
        return Artifact(payload=a.payload, meta=with_metrics(a, self.name, flags))


classify = register(_ClassifyPass())

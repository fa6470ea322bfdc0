from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping

from textsafe.framework import Artifact

logger = logging.getLogger(__name__)

PREVIEW_LEN = 60


def _preview(s: str, n: int = PREVIEW_LEN) -> str:
    """Return a safe preview slice for debug logs."""
    return repr(s[:n])


def pass_options(a: Artifact, name: str) -> Mapping[str, Any]:
    """Options recorded for ``name`` under ``meta['options']``."""
    return ((a.meta or {}).get("options") or {}).get(name, {})


def with_metrics(a: Artifact, name: str, values: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``a.meta`` with ``values`` stored under ``metrics[name]``."""
    meta = dict(a.meta or {})
    metrics = dict(meta.get("metrics") or {})
    metrics[name] = dict(values)
    meta["metrics"] = metrics
    return meta


@dataclass(frozen=True)
class TextPass:
    """A ``str -> str`` transform wrapped as a pipeline pass.

    Non-text payloads pass through untouched.
    """

    name: str
    transform: Callable[[str], str]
    description: str = ""

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, str):
            return a
        before = a.payload
        after = self.transform(before)
        logger.debug("%s: %s -> %s", self.name, _preview(before), _preview(after))
        stats = {"changed": before != after, "removed": max(len(before) - len(after), 0)}
        return Artifact(payload=after, meta=with_metrics(a, self.name, stats))

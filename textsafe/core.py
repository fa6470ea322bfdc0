from __future__ import annotations

import logging
import time
from typing import Any, Dict, Tuple

from textsafe.config import PipelineSpec
from textsafe.framework import Artifact, registry

logger = logging.getLogger(__name__)


def _input_artifact(text: str, spec: PipelineSpec) -> Artifact:
    """Seed an artifact with the spec's per-pass options."""
    return Artifact(payload=text, meta={"options": dict(spec.options)})


def run_text(text: str, spec: PipelineSpec | None = None) -> Tuple[Artifact, Dict[str, float]]:
    """Run ``spec.pipeline`` over ``text``; returns the artifact and per-pass timings.

    Unknown pass names raise ``KeyError`` before any pass runs.
    """

    spec = spec or PipelineSpec()
    passes = registry()
    missing = [name for name in spec.pipeline if name not in passes]
    if missing:
        raise KeyError(f"unknown pass(es): {', '.join(missing)}")

    artifact = _input_artifact(text, spec)
    timings: Dict[str, float] = {}
    for name in spec.pipeline:
        start = time.perf_counter()
        artifact = passes[name](artifact)
        timings[name] = time.perf_counter() - start
    logger.debug("pipeline %s finished", spec.pipeline)
    return artifact, timings


def run_report(artifact: Artifact) -> Dict[str, Any]:
    """Summarize a finished artifact for JSON output."""
    return {"text": artifact.payload, "metrics": (artifact.meta or {}).get("metrics", {})}

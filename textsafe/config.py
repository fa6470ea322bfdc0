"""Pipeline configuration.

Sources, lowest precedence first:
1. ``pipeline.yaml`` (``pipeline`` list + per-pass ``options``)
2. environment variables ``TEXTSAFE_<PASS>__<KEY>=value``
3. explicit overrides (CLI)
"""

from __future__ import annotations

import logging
import os
import pathlib
import warnings
from functools import reduce
from typing import Any, Dict, Iterable, List, Mapping

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_PIPELINE = ["fix_encoding", "full_clean_up", "classify"]
ENV_PREFIX = "TEXTSAFE_"

PassOptions = Dict[str, Dict[str, Any]]


class PipelineSpec(BaseModel):
    """Ordered pass names plus options keyed by pass name."""

    pipeline: List[str] = Field(default_factory=lambda: list(DEFAULT_PIPELINE))
    options: PassOptions = Field(default_factory=dict)


def _read_yaml(path: str | os.PathLike | None) -> Dict[str, Any]:
    """Return the parsed config, or {} when there is nothing to read."""
    if not path or not pathlib.Path(path).exists():
        return {}
    data = yaml.safe_load(pathlib.Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise TypeError(f"{path}: expected a mapping with 'pipeline'/'options'")
    return data


def _coerce(raw: str) -> Any:
    """YAML-coerce an env value so 'true', '42', '[a, b]' get real types."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def _env_overrides(steps: Iterable[str], environ: Mapping[str, str] = os.environ) -> PassOptions:
    known = set(steps)
    pairs = (
        (name[len(ENV_PREFIX) :].lower().split("__", 1), value)
        for name, value in environ.items()
        if name.startswith(ENV_PREFIX) and "__" in name[len(ENV_PREFIX) :]
    )
    out: PassOptions = {}
    for (step, key), value in pairs:
        if step in known:
            out.setdefault(step, {})[key] = _coerce(value)
    return out


def _merge_options(base: PassOptions, override: PassOptions) -> PassOptions:
    """Per-pass shallow merge; keys in ``override`` win."""
    return {step: {**base.get(step, {}), **override.get(step, {})} for step in base.keys() | override.keys()}


def _warn_unknown_options(pipeline: Iterable[str], opts: Mapping[str, Any]) -> None:
    unknown = sorted(set(opts) - set(pipeline))
    if unknown:
        warnings.warn(f"Unknown pipeline options: {', '.join(unknown)}", stacklevel=3)


def load_spec(
    path: str | os.PathLike | None = "pipeline.yaml",
    overrides: PassOptions | None = None,
) -> PipelineSpec:
    """Load YAML + env/CLI overrides into a validated PipelineSpec."""
    data = _read_yaml(path)
    pipeline = list(data.get("pipeline", DEFAULT_PIPELINE))
    layers = [layer for layer in (data.get("options") or {}, _env_overrides(pipeline), overrides) if layer]
    options: PassOptions = reduce(_merge_options, layers, {})

    _warn_unknown_options(pipeline, options)
    logger.debug("pipeline=%s options=%s", pipeline, options)
    return PipelineSpec.model_validate({**data, "pipeline": pipeline, "options": options})

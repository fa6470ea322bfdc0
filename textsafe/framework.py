"""Pass registry for text pipelines.

A pass is any callable with a ``name`` that maps an ``Artifact`` to a new
``Artifact``. Passes register themselves on import of ``textsafe.passes``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class Artifact:
    """Text (or any payload) plus per-run metadata.

    ``meta`` holds ``options`` (per-pass settings) and ``metrics`` (what each
    pass observed). Passes never mutate it in place.
    """

    payload: Any
    meta: Dict[str, Any] | None = None


@runtime_checkable
class Pass(Protocol):
    name: str

    def __call__(self, a: Artifact) -> Artifact: ...


_REGISTRY: Mapping[str, Pass] = MappingProxyType({})


def register(p: Pass) -> Pass:
    """Register ``p`` under ``p.name``; a later pass with the same name wins."""
    global _REGISTRY
    _REGISTRY = MappingProxyType({**_REGISTRY, p.name: p})
    return p


def run_step(name: str, a: Artifact) -> Artifact:
    return _REGISTRY[name](a)


def registry() -> Dict[str, Pass]:
    return dict(_REGISTRY)


def describe() -> Dict[str, str]:
    """Map each registered pass name to the first line of its docstring."""

    def _summary(p: Pass) -> str:
        doc = getattr(p, "description", None) or type(p).__doc__ or ""
        return doc.strip().splitlines()[0] if doc.strip() else ""

    return {name: _summary(p) for name, p in sorted(_REGISTRY.items())}

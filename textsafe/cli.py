from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Optional

import typer

from textsafe.cleanup import full_clean_up, slugify
from textsafe.config import load_spec
from textsafe.core import run_report, run_text
from textsafe.env_utils import log_level
from textsafe.framework import describe
from textsafe.passes.classify import classify_text
from textsafe.script_json import safe_json_dumps


def _spec_path_candidates(path: str | Path) -> Iterator[Path]:
    """Yield potential spec locations without hitting the filesystem."""
    candidate = Path(path)
    pkg_dir = Path(__file__).resolve().parent
    yield from (
        candidate,
        pkg_dir.parent / candidate,
        pkg_dir / candidate,
    )


def _resolve_spec_path(path: str | Path) -> Path:
    """Pick the first existing pipeline spec from candidate locations."""
    return next((p for p in _spec_path_candidates(path) if p.exists()), Path(path))


def _format_timings(timings: Mapping[str, float]) -> str:
    """Return ``timings`` as newline-delimited ``name: seconds`` strings."""
    return "\n".join(f"{n}: {t:.4f}s" for n, t in timings.items())


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else log_level(),
        format="[%(levelname)s] %(name)s:%(funcName)s - %(message)s",
    )


def _exit_with_error(exc: Exception) -> None:
    """Print ``exc`` to stderr and exit with status 1."""
    print(f"error: {exc}", file=sys.stderr)
    raise typer.Exit(1)


def _safe(func: Callable[[], None]) -> None:
    """Invoke ``func`` and exit non-zero on any exception."""
    try:
        func()
    except Exception as exc:  # pragma: no cover - exercised in CLI tests
        _exit_with_error(exc)


def _read_json(path: Optional[Path]) -> object:
    raw = path.read_text(encoding="utf-8") if path else sys.stdin.read()
    return json.loads(raw)


app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def clean(text: str) -> None:
    """Print TEXT after the full display clean-up."""
    print(full_clean_up(text))


@app.command()
def slug(text: str) -> None:
    """Print the URL slug for TEXT."""
    print(slugify(text))


@app.command()
def classify(text: str) -> None:
    """Print shouting/prize/garbage/link flags for TEXT as JSON."""
    print(json.dumps(classify_text(text), sort_keys=True))


@app.command()
def encode(
    path: Optional[Path] = typer.Argument(None, exists=True, dir_okay=False, readable=True),
) -> None:
    """Read JSON from PATH (or stdin) and print a script-safe literal."""
    _safe(lambda: print(safe_json_dumps(_read_json(path))))


@app.command("passes")
def list_passes() -> None:
    """List registered passes with a one-line summary."""
    for name, summary in describe().items():
        print(f"{name}: {summary}" if summary else name)


@app.command()
def run(
    text: str,
    spec: str = typer.Option("pipeline.yaml", "--spec"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Run the configured pass pipeline over TEXT."""

    def _run() -> None:
        _configure_logging(verbose)
        artifact, timings = run_text(text, load_spec(_resolve_spec_path(spec)))
        print(json.dumps(run_report(artifact), ensure_ascii=False, sort_keys=True))
        if verbose:
            print(_format_timings(timings), file=sys.stderr)

    _safe(_run)


if __name__ == "__main__":
    app()

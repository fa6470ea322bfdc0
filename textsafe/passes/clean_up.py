from __future__ import annotations

from textsafe import cleanup
from textsafe.codepoints import distinct_garbage_codepoints, remove_garbage_chars
from textsafe.env_utils import fix_encoding_enabled
from textsafe.framework import Artifact, register
from textsafe.passes._text_pass import TextPass, with_metrics


def _fix_encoding(text: str) -> str:
    return cleanup.repair_mojibake(text) if fix_encoding_enabled() else text


class _RemoveGarbagePass:
    """Drop garbage codepoints and record which ones were seen."""

    name = "remove_garbage"

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, str):
            return a
        found = sorted(distinct_garbage_codepoints(a.payload))
        stats = {"codepoints": [f"U+{cp:04X}" for cp in found]}
        return Artifact(payload=remove_garbage_chars(a.payload), meta=with_metrics(a, self.name, stats))


trim = register(TextPass("trim", cleanup.trim, "Strip leading and trailing controls and whitespace."))
fix_encoding = register(
    TextPass("fix_encoding", _fix_encoding, "Repair mojibake (TEXTSAFE_FIX_ENCODING toggles it).")
)
normalize = register(TextPass("normalize", cleanup.normalize, "NFKC, keeping ordinal indicators."))
remove_garbage = register(_RemoveGarbagePass())
strip_symbols = register(
    TextPass("strip_symbols", cleanup.remove_multibyte_symbols, "Remove 'Other Symbol' runs.")
)
full_clean_up = register(
    TextPass("full_clean_up", cleanup.full_clean_up, "trim, normalize, remove_garbage, strip_symbols.")
)

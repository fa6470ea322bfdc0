"""Passes that rewrite the payload into another form."""

from __future__ import annotations

from textsafe import cleanup
from textsafe.framework import Artifact, register
from textsafe.passes._text_pass import TextPass, pass_options, with_metrics
from textsafe.shouting import no_shouting as _no_shouting

DEFAULT_LENGTH = 140


class _ShortenPass:
    """Cut text to `length` characters plus `sep` (options: length, sep)."""

    name = "shorten"

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, str):
            return a
        opts = pass_options(a, self.name)
        length = int(opts.get("length", DEFAULT_LENGTH))
        sep = str(opts.get("sep", "…"))
        shortened = cleanup.shorten(a.payload, length, sep)
        truncated = len(a.payload) > length + len(sep)
        return Artifact(payload=shortened, meta=with_metrics(a, self.name, {"truncated": truncated}))


slugify = register(TextPass("slugify", cleanup.slugify, "Lowercase ASCII slug for URLs."))
no_shouting = register(TextPass("no_shouting", _no_shouting, "Lowercase text that is mostly capitals."))
shorten = register(_ShortenPass())

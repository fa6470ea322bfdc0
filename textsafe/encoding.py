"""Base64 and URL helpers.

Decoders report malformed input as ``None``; callers treat that as a normal
outcome.
"""

from __future__ import annotations

import base64
import binascii
import re
from typing import Optional
from urllib.parse import quote_plus, unquote

_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_decode(text: str) -> Optional[str]:
    try:
        return base64.b64decode(text, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None


def decode_uri_path(path: str) -> Optional[str]:
    """Percent-decode a URL path segment, or ``None`` if it is malformed."""

    if _BAD_PERCENT_ESCAPE.search(path):
        return None
    try:
        return unquote(path, encoding="utf-8", errors="strict")
    except UnicodeDecodeError:
        return None


def urlencode(text: str) -> str:
    return quote_plus(text, encoding="utf-8")

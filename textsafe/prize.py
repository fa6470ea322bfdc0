"""Prize / scam solicitation heuristic."""

from __future__ import annotations

import re

PRIZE_RE = re.compile(
    r"(prize|\$|€|£|¥|₽|元|₹|₱|₿|rupee|rupiah|ringgit|(\b|\d)usd|dollar|paypal|cash|award"
    r"|\bfees?\b|\beuros?\b|price|(\b|\d)btc|bitcoin)",
    re.IGNORECASE | re.ASCII,
)


def looks_like_prize(text: str) -> bool:
    """Return True if any money/prize token occurs anywhere in ``text``."""
    return PRIZE_RE.search(text) is not None

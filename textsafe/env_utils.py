import logging
import os

_TRUTHY = {"true", "1", "yes", "on"}


def fix_encoding_enabled() -> bool:
    """Return True if the ``fix_encoding`` pass should repair mojibake."""
    val = os.getenv("TEXTSAFE_FIX_ENCODING")
    if val is None:
        return True
    return val.lower() in _TRUTHY


def log_level() -> int:
    """Resolve ``TEXTSAFE_LOG_LEVEL`` to a logging level, WARNING by default."""
    name = os.getenv("TEXTSAFE_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING

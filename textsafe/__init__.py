# Auto-register passes on package import (e.g., when importing any submodule)
from . import passes  # noqa: F401
from .cleanup import full_clean_up, normalize, remove_multibyte_symbols, slugify
from .codepoints import (
    distinct_garbage_chars,
    has_garbage_chars,
    is_garbage_char,
    remove_garbage_chars,
)
from .prize import looks_like_prize
from .script_json import safe_json_dumps, safe_json_string, safe_json_value
from .shouting import is_shouting, no_shouting

__all__: list[str] = [
    "distinct_garbage_chars",
    "full_clean_up",
    "has_garbage_chars",
    "is_garbage_char",
    "is_shouting",
    "looks_like_prize",
    "no_shouting",
    "normalize",
    "remove_garbage_chars",
    "remove_multibyte_symbols",
    "safe_json_dumps",
    "safe_json_string",
    "safe_json_value",
    "slugify",
]

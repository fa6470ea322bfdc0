"""Script-safe JSON literals.

``safe_json_value`` renders a structured value as a JavaScript literal that can
be concatenated into an HTML ``<script>`` element without further escaping.
Beyond regular JSON escaping it escapes ``<``, ``>``, ``&``, ``'`` and the
U+2028/U+2029 separators, so ``</script>``, ``<!--`` and friends never appear
verbatim. Every escape is a standard JSON escape: ``json.loads`` on the output
reproduces the input value.

The value model is closed: ``JsNull``, ``JsBool``, ``JsNumber``, ``JsString``,
``JsArray`` and ``JsObject``. Anything else is rejected with ``TypeError``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping, Tuple, Type, Union


@dataclass(frozen=True)
class JsNull:
    pass


@dataclass(frozen=True)
class JsBool:
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"JsBool expects bool, got {type(self.value).__name__}")


@dataclass(frozen=True)
class JsNumber:
    value: Union[int, float, Decimal]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float, Decimal)):
            raise TypeError(f"JsNumber expects int, float or Decimal, got {type(self.value).__name__}")
        if not _is_finite(self.value):
            raise ValueError(f"JsNumber cannot represent {self.value!r}")


@dataclass(frozen=True)
class JsString:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"JsString expects str, got {type(self.value).__name__}")


@dataclass(frozen=True)
class JsArray:
    items: Tuple["JsValue", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            raise TypeError(f"JsArray items must be a tuple, got {type(self.items).__name__}")
        for item in self.items:
            _require_js_value("JsArray item", item)


@dataclass(frozen=True)
class JsObject:
    """Ordered mapping; ``fields`` keeps insertion order."""

    fields: Tuple[Tuple[str, "JsValue"], ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.fields, tuple):
            raise TypeError(f"JsObject fields must be a tuple, got {type(self.fields).__name__}")
        for field in self.fields:
            if not (isinstance(field, tuple) and len(field) == 2):
                raise TypeError(f"JsObject field must be a (key, value) pair, got {field!r}")
            key, value = field
            if not isinstance(key, str):
                raise TypeError(f"JsObject key must be str, got {key!r}")
            _require_js_value(f"JsObject value for {key!r}", value)


JsValue = Union[JsNull, JsBool, JsNumber, JsString, JsArray, JsObject]
_VARIANTS = (JsNull, JsBool, JsNumber, JsString, JsArray, JsObject)

JS_NULL = JsNull()


def _require_js_value(what: str, value: Any) -> None:
    if type(value) not in _VARIANTS:
        raise TypeError(f"{what} is not a JsValue: {type(value).__name__}")


def _is_finite(n: Union[int, float, Decimal]) -> bool:
    if isinstance(n, Decimal):
        return n.is_finite()
    if isinstance(n, float):
        return math.isfinite(n)
    return True


# ---------------------------------------------------------------------------
# Parsed JSON -> JsValue
# ---------------------------------------------------------------------------


def to_js_value(obj: Any) -> JsValue:
    """Convert a ``json.loads``-style tree into the closed value model."""

    if obj is None:
        return JS_NULL
    if isinstance(obj, bool):
        return JsBool(obj)
    if isinstance(obj, (int, float, Decimal)):
        return JsNumber(obj)
    if isinstance(obj, str):
        return JsString(obj)
    if isinstance(obj, (list, tuple)):
        return JsArray(tuple(to_js_value(item) for item in obj))
    if isinstance(obj, Mapping):
        bad_keys = [k for k in obj if not isinstance(k, str)]
        if bad_keys:
            raise TypeError(f"object keys must be str, got {bad_keys[0]!r}")
        return JsObject(tuple((k, to_js_value(v)) for k, v in obj.items()))
    if isinstance(obj, _VARIANTS):
        return obj
    raise TypeError(f"cannot encode {type(obj).__name__} as a script literal")


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------

_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_ESCAPED_CODEPOINTS = (
    *range(0x00, 0x20),
    0x7F,
    ord("<"),
    ord(">"),
    ord("&"),
    ord("'"),
    0x2028,
    0x2029,
    *range(0xD800, 0xE000),  # lone surrogates
)

_SCRIPT_SAFE_TRANSLATION: Dict[int, str] = {
    cp: _SHORT_ESCAPES.get(chr(cp), f"\\u{cp:04x}") for cp in _ESCAPED_CODEPOINTS
}
_SCRIPT_SAFE_TRANSLATION.update({ord(ch): esc for ch, esc in _SHORT_ESCAPES.items()})


def safe_json_string(text: str) -> str:
    """Quote ``text`` as a JSON string safe inside ``<script>``."""
    return '"' + text.translate(_SCRIPT_SAFE_TRANSLATION) + '"'


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _encode_null(_: JsNull) -> str:
    return "null"


def _encode_bool(value: JsBool) -> str:
    return "true" if value.value else "false"


def _encode_number(value: JsNumber) -> str:
    n = value.value
    return repr(n) if isinstance(n, float) else str(n)


def _encode_string(value: JsString) -> str:
    return safe_json_string(value.value)


def _encode_array(value: JsArray) -> str:
    return "[" + ",".join(safe_json_value(item) for item in value.items) + "]"


def _encode_object(value: JsObject) -> str:
    pairs = (f"{safe_json_string(k)}:{safe_json_value(v)}" for k, v in value.fields)
    return "{" + ",".join(pairs) + "}"


_ENCODERS: Mapping[Type[Any], Callable[[Any], str]] = {
    JsNull: _encode_null,
    JsBool: _encode_bool,
    JsNumber: _encode_number,
    JsString: _encode_string,
    JsArray: _encode_array,
    JsObject: _encode_object,
}


def safe_json_value(value: JsValue) -> str:
    """Encode ``value``; raises ``TypeError`` for anything outside ``JsValue``."""

    encoder = _ENCODERS.get(type(value))
    if encoder is None:
        raise TypeError(f"not a JsValue: {type(value).__name__}")
    return encoder(value)


def safe_json_dumps(obj: Any) -> str:
    """Convert a plain JSON tree and encode it in one step."""
    return safe_json_value(to_js_value(obj))

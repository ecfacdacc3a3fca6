"""Marshal request parameters into PostgreSQL named-argument function calls.

Every data fetch is ``SELECT * FROM func(p_name := value, ...)``; the helpers
here only build that text. Quoting of text literals is delegated to the
driver through the ``quote`` callable.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterable, Mapping

from tao.core.protocols import ISDKParam
from tao.core.types import ParamType

Quote = Callable[[str], str]

NULL = "NULL"
PARAM_PREFIX = "p_"
SEPARATOR = ", "

_QUOTED_TYPES = frozenset({ParamType.STRING.value, ParamType.ARRAY.value, ParamType.OBJECT.value})
_TRUTHY = frozenset({"1", "true", "t", "yes", "on"})


def bool_literal(value: Any) -> str:
    if isinstance(value, str):
        value = value.strip().lower() in _TRUTHY
    return "TRUE" if value else "FALSE"


def bytea_literal(value: Any, quote: Quote) -> str:
    """Hex-format ``bytea`` literal; text values are UTF-8 encoded first."""
    if isinstance(value, str):
        value = value.encode("utf-8")
    hex_text = "\\x" + bytes(value).hex()
    return f"{quote(hex_text)}::bytea"


def token(name: str, literal: str) -> str:
    return f"{PARAM_PREFIX}{name} := {literal}"


def named_args(mapping: Mapping[str, Any], quote: Quote) -> str:
    """Caller-supplied ``{name: value}`` pairs; only text values are quoted."""
    items: list[str] = []
    for name, value in mapping.items():
        if isinstance(value, str):
            literal = quote(value)
        elif value is None:
            literal = NULL
        elif isinstance(value, bool):
            literal = bool_literal(value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            literal = bytea_literal(value, quote)
        else:
            literal = str(value)
        items.append(token(name, literal))
    return SEPARATOR.join(items)


def param_literal(param: ISDKParam, quote: Quote) -> str:
    """SQL literal for one SDK parameter, chosen by its declared type."""
    kind = param.get_type()
    value = param.get_value()
    if kind == ParamType.NULL:
        return NULL
    if kind == ParamType.BOOLEAN:
        return bool_literal(value)
    if kind == ParamType.BINARY:
        return bytea_literal(value, quote)
    if kind in _QUOTED_TYPES:
        if not isinstance(value, str):
            value = json.dumps(value)
        return quote(value)
    return str(value)


def param_args(params: Iterable[ISDKParam], quote: Quote) -> str:
    """All SDK parameters as named arguments."""
    return SEPARATOR.join(token(p.get_name(), param_literal(p, quote)) for p in params)


def function_call(name: str, args: str = "") -> str:
    """``SELECT`` over a set-returning function."""
    return f"SELECT * FROM {name}({args})"

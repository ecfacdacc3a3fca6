"""Type aliases and enums used across Tao."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

Row = dict[str, Any]


class ParamType(StrEnum):
    """Declared type tags of SDK request parameters."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BINARY = "binary"
    ARRAY = "array"
    OBJECT = "object"

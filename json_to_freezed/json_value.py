"""
Closed classification of JSON values.

``json.loads`` produces plain Python objects. Every component that looks at a
value dispatches on the ``JsonKind`` tag returned by ``json_kind`` instead of
testing Python types itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class JsonKind(Enum):
    """Kind of a JSON value."""

    NULL = "null"
    BOOL = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def json_kind(value: Any) -> JsonKind | None:
    """Classify a decoded JSON value.

    Returns None for values that cannot come out of a JSON document.
    """
    if value is None:
        return JsonKind.NULL
    # bool is a subclass of int, test it first
    if isinstance(value, bool):
        return JsonKind.BOOL
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    return None


def is_integral(value: int | float) -> bool:
    """True when a number has no fractional component (``1`` and ``1.0``)."""
    return value % 1 == 0

"""
Type inference for JSON values.

Maps a single sampled value to its Dart type. Only the value at hand is
looked at: arrays are typed from their first element and numbers from their
literal value, so ``1`` is an ``int`` even where ``1.5`` could appear.
"""

from __future__ import annotations

from typing import Any

from .ir_nodes import BOOL, DOUBLE, DYNAMIC, INT, MAP, STRING, TypeRef
from .json_value import JsonKind, is_integral, json_kind


def _infer_scalar(value: Any, kind: JsonKind | None) -> TypeRef:
    match kind:
        case JsonKind.STRING:
            return STRING
        case JsonKind.NUMBER:
            return INT if is_integral(value) else DOUBLE
        case JsonKind.BOOL:
            return BOOL
        case JsonKind.OBJECT:
            return MAP
        case _:
            return DYNAMIC


def infer(value: Any) -> TypeRef:
    """
    Infer the type of a JSON value.

    Args:
        value: A value decoded by ``json.loads``

    Returns:
        The inferred type, ``dynamic`` for null and unrecognized values
    """
    # Unwrap nested arrays iteratively, sampling the first element each time
    depth = 0
    kind = json_kind(value)
    while kind is JsonKind.ARRAY:
        depth += 1
        if len(value) == 0:
            value, kind = None, JsonKind.NULL
            break
        value = value[0]
        kind = json_kind(value)

    result = _infer_scalar(value, kind)
    for _ in range(depth):
        result = TypeRef.list_of(result)
    return result

"""
Decomposition of a JSON object into flat class schemas.

Every nested object, and the first element of every array of objects,
becomes a class of its own. Classes are collected children first, so the
root class is the last one in the accumulator.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from .ir_nodes import ClassSchema, FieldSchema, TypeRef
from .json_value import JsonKind, json_kind
from .name_allocator import NameAllocator
from .type_inference import infer
from .utils import camel_case, capitalize

logger = logging.getLogger(__name__)

# Class name used when a key gives no usable candidate (e.g. "" or "a" for an array)
FALLBACK_CLASS_NAME = "Item"


def nested_class_candidate(field_name: str) -> str:
    """Candidate class name for an object-valued field: ``address`` -> ``Address``."""
    return capitalize(field_name) or FALLBACK_CLASS_NAME


def item_class_candidate(field_name: str) -> str:
    """Candidate class name for an array-of-objects field.

    The trailing character is dropped as a naive singular: ``items`` ->
    ``Item``, ``orders`` -> ``Order``. Anything but a plain ``s`` plural comes
    out wrong (``addresses`` -> ``Addresse``, ``people`` -> ``Peopl``).
    """
    return capitalize(field_name[:-1]) or FALLBACK_CLASS_NAME


@dataclass
class _Frame:
    """A class being built: its object, final name and fields so far."""

    name: str
    entries: Iterator[tuple[str, Any]]
    fields: list[FieldSchema] = field(default_factory=list)


class SchemaWalker:
    """Walks a JSON object and produces the class schemas describing it."""

    def __init__(self, allocator: NameAllocator | None = None):
        self.allocator = allocator if allocator is not None else NameAllocator()

    def decompose(self, obj: Mapping[str, Any], proposed_name: str, classes: list[ClassSchema]) -> ClassSchema:
        """
        Decompose an object into class schemas.

        Args:
            obj: The JSON object
            proposed_name: Candidate name for the class of ``obj``
            classes: Accumulator receiving every class found, children before parents

        Returns:
            The schema of ``obj`` itself (also the last one appended to ``classes``)
        """
        # Explicit stack: names are allocated when an object is reached and
        # schemas are appended once all of their fields are done
        stack = [self._open(obj, proposed_name)]
        schema = None
        while stack:
            frame = stack[-1]
            entry = next(frame.entries, None)
            if entry is None:
                stack.pop()
                schema = ClassSchema(name=frame.name, fields=frame.fields)
                classes.append(schema)
                logger.debug("Decomposed class %s with %d fields", schema.name, len(schema.fields))
                continue

            key, value = entry
            field_name = camel_case(key)
            kind = json_kind(value)

            if kind is JsonKind.OBJECT:
                child = self._open(value, nested_class_candidate(field_name))
                frame.fields.append(FieldSchema(key, field_name, TypeRef.class_ref(child.name), child.name))
                stack.append(child)
            elif kind is JsonKind.ARRAY and len(value) > 0 and json_kind(value[0]) is JsonKind.OBJECT:
                child = self._open(value[0], item_class_candidate(field_name))
                frame.fields.append(FieldSchema(key, field_name, TypeRef.list_of(TypeRef.class_ref(child.name)), child.name))
                stack.append(child)
            else:
                frame.fields.append(FieldSchema(key, field_name, infer(value)))

        return schema

    def _open(self, obj: Mapping[str, Any], candidate: str) -> _Frame:
        return _Frame(name=self.allocator.allocate(candidate), entries=iter(obj.items()))

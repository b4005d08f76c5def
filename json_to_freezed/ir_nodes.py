"""
IR (Intermediate Representation) node definitions.

These nodes describe the classes extracted from one JSON document, ready
for code generation. Field types are resolved and class names are final.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """Kind of type in the IR."""

    STRING = "String"
    INT = "int"
    DOUBLE = "double"
    BOOL = "bool"
    DYNAMIC = "dynamic"
    MAP = "Map<String, dynamic>"
    LIST = "List"  # List<item>
    CLASS = "class"  # A generated class


@dataclass(frozen=True)
class TypeRef:
    """A resolved field type."""

    kind: TypeKind = TypeKind.DYNAMIC

    # Class name for CLASS
    name: str = ""

    # Element type for LIST
    item: TypeRef | None = None

    @staticmethod
    def list_of(item: TypeRef) -> TypeRef:
        return TypeRef(TypeKind.LIST, item=item)

    @staticmethod
    def class_ref(name: str) -> TypeRef:
        return TypeRef(TypeKind.CLASS, name=name)

    def render(self, class_formatter: Callable[[str], str] | None = None) -> str:
        """
        Render the type in Dart syntax.

        Args:
            class_formatter: Optional hook applied to class names

        Returns:
            The type expression, e.g. ``List<Address>``
        """
        depth = 0
        innermost = self
        while innermost.kind is TypeKind.LIST:
            depth += 1
            if innermost.item is None:
                innermost = TypeRef(TypeKind.DYNAMIC)
                break
            innermost = innermost.item

        if innermost.kind is TypeKind.CLASS:
            rendered = class_formatter(innermost.name) if class_formatter else innermost.name
        else:
            rendered = innermost.kind.value

        return "List<" * depth + rendered + ">" * depth

    def __str__(self) -> str:
        return self.render()


STRING = TypeRef(TypeKind.STRING)
INT = TypeRef(TypeKind.INT)
DOUBLE = TypeRef(TypeKind.DOUBLE)
BOOL = TypeRef(TypeKind.BOOL)
DYNAMIC = TypeRef(TypeKind.DYNAMIC)
MAP = TypeRef(TypeKind.MAP)


@dataclass
class FieldSchema:
    """A field of a generated class."""

    original_name: str = ""  # JSON key
    name: str = ""  # lowerCamelCase field name
    type_ref: TypeRef = DYNAMIC

    # Name of the nested class this field was decomposed into
    nested_class: str | None = None


@dataclass
class ClassSchema:
    """A generated class."""

    name: str = ""
    fields: list[FieldSchema] = field(default_factory=list)

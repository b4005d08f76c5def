"""
Dart freezed code emitter.

Renders class schemas through the Jinja2 templates in ``templates/dart`` and
records where each class name lands in the output, so that a class can later
be renamed by position instead of by pattern search.
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from .config import FieldMode, GeneratorConfig
from .ir_nodes import ClassSchema, FieldSchema

logger = logging.getLogger(__name__)

# First code point tried for the reference markers (Unicode private use area)
_MARKER_BASE = 0xE000


@dataclass(frozen=True)
class ClassReference:
    """A span of the document that holds a class name."""

    start: int
    end: int
    name: str


@dataclass(frozen=True)
class EmittedDocument:
    """Rendered document with the spans of every class reference, in text order."""

    text: str
    references: tuple[ClassReference, ...] = ()


@dataclass(frozen=True)
class _RefMarkers:
    """Pair of characters wrapping class names while rendering.

    Picked for each document among characters that appear nowhere in the
    rendered names, keys or header, then stripped from the output.
    """

    start: str
    end: str

    @staticmethod
    def pick(texts: Iterable[str]) -> _RefMarkers:
        used = set()
        for text in texts:
            used.update(text)
        free = (chr(code_point) for code_point in range(_MARKER_BASE, sys.maxunicode + 1) if chr(code_point) not in used)
        return _RefMarkers(next(free), next(free))

    def mark(self, name: str) -> str:
        return f"{self.start}{name}{self.end}"

    def extract(self, marked: str) -> EmittedDocument:
        """Strip the markers and turn them into reference spans."""
        pattern = re.compile(f"{re.escape(self.start)}([^{re.escape(self.start)}{re.escape(self.end)}]*){re.escape(self.end)}")
        pieces = []
        references = []
        position = 0
        removed = 0
        for match in pattern.finditer(marked):
            pieces.append(marked[position : match.start()])
            name = match.group(1)
            start = match.start() - removed
            references.append(ClassReference(start, start + len(name), name))
            pieces.append(name)
            removed += len(self.start) + len(self.end)
            position = match.end()
        pieces.append(marked[position:])
        return EmittedDocument("".join(pieces), tuple(references))


@jinja2.pass_context
def _class_ref_filter(context: jinja2.runtime.Context, name: str) -> str:
    return context["markers"].mark(name)


class CodeEmitter:
    """Renders class schemas into a single freezed source file."""

    TEMPLATE_LANG = "dart"

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config if config is not None else GeneratorConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["class_ref"] = _class_ref_filter

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.TEMPLATE_LANG}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.TEMPLATE_LANG}.jinja2")

    def emit(
        self,
        classes: list[ClassSchema],
        file_name: str,
        field_mode: FieldMode | str | None = None,
        generation_comment: str = "",
    ) -> EmittedDocument:
        """
        Render the header and every class, in the given order.

        Args:
            classes: Class schemas, root first
            file_name: Base name used by the ``part`` directives
            field_mode: Field modifier, defaults to the configured one
            generation_comment: Optional comment line placed before the header

        Returns:
            The document and its class reference spans
        """
        field_mode = self.config.field_mode if field_mode is None else FieldMode.parse(field_mode)

        header = [generation_comment, self.config.serialization_package, file_name, self.config.file_extension]
        markers = _RefMarkers.pick(header + [text for class_schema in classes for text in self._rendered_names(class_schema)])

        prefix = self.prefix_template.render(
            generation_comment=generation_comment,
            serialization_package=self.config.serialization_package,
            file_name=file_name,
            extension=self.config.file_extension,
        )
        rendered_classes = [self.class_template.render(self._prepare_class_context(class_schema, field_mode, markers)) for class_schema in classes]

        document = markers.extract(prefix + "\n" + "\n".join(rendered_classes))
        logger.debug("Emitted %d classes, %d class references", len(classes), len(document.references))
        return document

    @staticmethod
    def _rendered_names(class_schema: ClassSchema) -> list[str]:
        return [class_schema.name] + [field.name for field in class_schema.fields]

    def _prepare_class_context(self, class_schema: ClassSchema, field_mode: FieldMode, markers: _RefMarkers) -> dict[str, Any]:
        return {
            "markers": markers,
            "class_name": class_schema.name,
            "fields": [{"name": field.name, "declaration": self.field_declaration(field, field_mode, markers.mark)} for field in class_schema.fields],
        }

    @staticmethod
    def field_declaration(field: FieldSchema, field_mode: FieldMode, class_formatter: Callable[[str], str] | None = None) -> str:
        """Constructor parameter for a field, e.g. ``final Address? address;``.

        The type is nullable whatever the field mode.
        """
        type_expr = field.type_ref.render(class_formatter)
        parts = [field_mode.modifier, f"{type_expr}?", field.name]
        return " ".join(part for part in parts if part) + ";"

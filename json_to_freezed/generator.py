"""
Top level JSON to freezed generation.

1. Validate and parse the JSON input
2. Decompose the parsed value into class schemas (children first)
3. Reverse them so the root class comes first
4. Render the document
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from . import __version__
from .config import FieldMode, GeneratorConfig
from .emitter import ClassReference, CodeEmitter
from .errors import InvalidClassNameError, InvalidJsonError, MissingInputError, UnknownClassError
from .ir_nodes import ClassSchema
from .json_value import JsonKind, json_kind
from .name_allocator import NameAllocator
from .renamer import rename_references
from .schema_walker import SchemaWalker
from .utils import is_valid_identifier, snake_to_pascal_case

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Generated document and the classes it declares.

    Attributes:
        text: The freezed source
        class_names: Declared classes in output order, root first
        references: Every span of ``text`` that holds a class name
        file_name: Base name used by the ``part`` directives
    """

    text: str
    class_names: tuple[str, ...]
    references: tuple[ClassReference, ...] = ()
    file_name: str = ""

    def rename_class(self, old_name: str, new_name: str) -> GenerationResult:
        """
        Rename a class, including field types pointing to it.

        Raises:
            UnknownClassError: If ``old_name`` is not a generated class
            InvalidClassNameError: If ``new_name`` is not a valid identifier or
                already names another generated class
        """
        if old_name not in self.class_names:
            raise UnknownClassError(f"Unknown class {old_name!r}")
        if not is_valid_identifier(new_name):
            raise InvalidClassNameError(f"Invalid class name {new_name!r}")
        if new_name != old_name and new_name in self.class_names:
            raise InvalidClassNameError(f"Class name {new_name!r} is already declared")

        text, references = rename_references(self.text, self.references, old_name, new_name)
        class_names = tuple(new_name if name == old_name else name for name in self.class_names)
        return GenerationResult(text, class_names, references, self.file_name)

    @property
    def output_file_name(self) -> str:
        return output_file_name(self.file_name)


def output_file_name(file_name: str, extension: str = "dart") -> str:
    """Name of the file the document is saved to: ``user_profile`` -> ``user_profile.dart``."""
    return f"{file_name or GeneratorConfig().default_file_name}.{extension}"


class FreezedGenerator:
    """Generates freezed models from JSON documents."""

    def __init__(self, config: GeneratorConfig | None = None, generation_comment: str | None = None):
        """
        Initialize the generator.

        Args:
            config: Generation configuration
            generation_comment: Comment put above the header when
                ``config.add_generation_comment`` is set, built from the
                command line when not given
        """
        self.config = config if config is not None else GeneratorConfig()
        self.emitter = CodeEmitter(self.config)
        self._generation_comment = generation_comment

    def parse(self, json_text: str | None) -> Any:
        """
        Parse JSON input.

        Raises:
            MissingInputError: If the input is empty
            InvalidJsonError: If the input is not valid JSON
        """
        if json_text is None or not json_text.strip():
            raise MissingInputError()
        try:
            return json.loads(json_text)
        except (ValueError, RecursionError) as e:
            logger.debug("Could not parse JSON input: %s", e)
            raise InvalidJsonError() from e

    def generate(self, json_text: str | None, file_name: str = "", field_mode: FieldMode | str | None = None) -> GenerationResult:
        """
        Generate freezed models from JSON text.

        Args:
            json_text: The JSON document
            file_name: underscore_file base name, the root class is its PascalCase form
            field_mode: Field modifier, defaults to the configured one

        Returns:
            The generation result

        Raises:
            MissingInputError: If the input is empty
            InvalidJsonError: If the input is not valid JSON
            InvalidFieldModeError: If the field mode is unknown
        """
        if field_mode is not None:
            field_mode = FieldMode.parse(field_mode)
        value = self.parse(json_text)
        return self.generate_from_value(value, file_name, field_mode)

    def generate_from_value(self, value: Any, file_name: str = "", field_mode: FieldMode | str | None = None) -> GenerationResult:
        """Generate freezed models from an already decoded JSON value."""
        field_mode = self.config.field_mode if field_mode is None else FieldMode.parse(field_mode)
        file_name = file_name or self.config.default_file_name
        root_name = snake_to_pascal_case(file_name)

        classes = self.decompose(value, root_name)
        # Root class first, nested classes after it
        classes.reverse()

        document = self.emitter.emit(classes, file_name, field_mode, self._get_generation_comment())
        class_names = tuple(class_schema.name for class_schema in classes)
        logger.debug("Generated %s: %s", output_file_name(file_name, self.config.file_extension), ", ".join(class_names))
        return GenerationResult(document.text, class_names, document.references, file_name)

    def decompose(self, value: Any, root_name: str) -> list[ClassSchema]:
        """Decompose a JSON value into class schemas, root last."""
        classes: list[ClassSchema] = []
        walker = SchemaWalker(NameAllocator())

        kind = json_kind(value)
        if kind is JsonKind.ARRAY and len(value) > 0 and json_kind(value[0]) is JsonKind.OBJECT:
            value = value[0]
        elif kind is not JsonKind.OBJECT:
            logger.warning("JSON input is not an object (%s), generating %s without fields", kind.value if kind else type(value).__name__, root_name)
            value = {}

        walker.decompose(value, root_name, classes)
        return classes

    def _get_generation_comment(self) -> str:
        """Generate a command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""
        if self._generation_comment is not None:
            return self._generation_comment

        # Reconstruct command line using CLI utilities
        try:
            from .cli_utils import reconstruct_command_line
            from .json_to_freezed import json_to_freezed as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            # Fallback if Click command not available
            command_line = "json_to_freezed"

        return f"// Generated by json_to_freezed v{__version__} : {command_line}"


def generate(
    json_text: str | None,
    file_name: str = "",
    field_mode: FieldMode | str | None = None,
    config: GeneratorConfig | None = None,
) -> GenerationResult:
    """Generate freezed models from JSON text. See ``FreezedGenerator.generate``."""
    return FreezedGenerator(config).generate(json_text, file_name, field_mode)


def generate_from_value(
    value: Any,
    file_name: str = "",
    field_mode: FieldMode | str | None = None,
    config: GeneratorConfig | None = None,
) -> GenerationResult:
    """Generate freezed models from a decoded JSON value."""
    return FreezedGenerator(config).generate_from_value(value, file_name, field_mode)

"""JSON to freezed

A Python package for generating Dart freezed model classes from
JSON documents. Nested objects and arrays of objects become classes
of their own, and generated classes can be renamed afterwards.
"""

__version__ = "1.0.0"

from .config import FieldMode, GeneratorConfig, OutputConfig, OutputMode
from .errors import (
    GenerationError,
    InvalidClassNameError,
    InvalidFieldModeError,
    InvalidJsonError,
    InvalidOutputError,
    MissingInputError,
    UnknownClassError,
)
from .generator import FreezedGenerator, GenerationResult, generate, generate_from_value, output_file_name
from .renamer import collect_class_names, rename_class
from .writer import AtomicWriter

__all__ = [
    "FreezedGenerator",
    "GenerationResult",
    "generate",
    "generate_from_value",
    "output_file_name",
    "rename_class",
    "collect_class_names",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "FieldMode",
    "AtomicWriter",
    "GenerationError",
    "MissingInputError",
    "InvalidJsonError",
    "InvalidFieldModeError",
    "UnknownClassError",
    "InvalidClassNameError",
    "InvalidOutputError",
]

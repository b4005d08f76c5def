"""
Configuration for the freezed model generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import InvalidFieldModeError


class FieldMode(str, Enum):
    """Modifier written in front of every field of the factory constructor.

    Field types are nullable in every mode.
    """

    FINAL = "final"  # final String? name;
    REQUIRED = "required"  # required String? name;
    OPTIONAL = "optional"  # String? name;

    @property
    def modifier(self) -> str:
        return "" if self is FieldMode.OPTIONAL else self.value

    @classmethod
    def parse(cls, value: FieldMode | str) -> FieldMode:
        """Convert a field mode name, rejecting anything but the three modes."""
        if isinstance(value, FieldMode):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise InvalidFieldModeError(f"Unknown field mode {value!r}, expected one of: {choices}") from None


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Modifier in front of each field
    field_mode: FieldMode = FieldMode.FINAL

    # Base file name used when none is given
    default_file_name: str = "your_name_model"

    # Package imported at the top of the generated file
    serialization_package: str = "package:freezed_annotation/freezed_annotation.dart"

    # Extension of the generated file and of its part files
    file_extension: str = "dart"

    # Add generation comment at top of file
    add_generation_comment: bool = False

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "field_mode":
                config.field_mode = FieldMode.parse(v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "field_mode": self.field_mode.value,
            "default_file_name": self.default_file_name,
            "serialization_package": self.serialization_package,
            "file_extension": self.file_extension,
            "add_generation_comment": self.add_generation_comment,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }

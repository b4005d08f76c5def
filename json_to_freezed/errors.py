"""
Exceptions raised by the generator.

The messages of ``MissingInputError`` and ``InvalidJsonError`` are meant to be
shown to the user as is.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for every error raised while generating freezed models."""

    pass


class MissingInputError(GenerationError):
    """Raised when no JSON input was provided."""

    def __init__(self, message: str = "Please provide JSON input!"):
        super().__init__(message)


class InvalidJsonError(GenerationError):
    """Raised when the JSON input cannot be parsed. Nothing is generated."""

    def __init__(self, message: str = "Invalid JSON input, Please make some change!"):
        super().__init__(message)


class InvalidFieldModeError(GenerationError, ValueError):
    """Raised for a field mode other than final, required or optional."""

    pass


class UnknownClassError(GenerationError, KeyError):
    """Raised when renaming a class that is not part of a generation result."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class InvalidClassNameError(GenerationError, ValueError):
    """Raised when a class would be renamed to something that is not an identifier."""

    pass


class InvalidOutputError(GenerationError):
    """Raised when generated code fails validation before being written.

    This can happen when:
    - The document has unbalanced braces or parentheses
    - The document contains no freezed class
    """

    pass

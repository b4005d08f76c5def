"""
Atomic file writer for generated models.

Ensures that file writes are atomic so that an interrupted run never
leaves a half written model file.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from .errors import InvalidOutputError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_dart: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_dart: Optional validation function for the generated code
        """
        self._validate_dart = validate_dart or self._default_validate_dart

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            InvalidOutputError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_dart(content)

            temp_path.replace(path)
        except Exception:
            # Clean up temp file on any error
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

        logger.debug("Wrote %s", path)

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> bool:
        """Write content only if the file doesn't exist.

        Returns:
            True if file was written

        Raises:
            FileExistsError: If the file already exists
            InvalidOutputError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")

        self.write(path, content, validate)
        return True

    def _default_validate_dart(self, content: str) -> None:
        """Basic structural checks of a freezed model file.

        Raises:
            InvalidOutputError: If validation fails
        """
        if "@freezed" not in content or "class " not in content:
            raise InvalidOutputError("Generated code has no freezed class")

        for open_char, close_char in (("{", "}"), ("(", ")")):
            opened = content.count(open_char)
            closed = content.count(close_char)
            if opened != closed:
                raise InvalidOutputError(f"Generated code has unbalanced {open_char}{close_char}: {opened} open, {closed} close")

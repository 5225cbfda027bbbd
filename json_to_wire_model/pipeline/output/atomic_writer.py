"""
Atomic file writer for safe code generation.

Ensures that a generation run either writes all of its units or none of
them, so an interrupted or failing run never leaves a half-updated
package behind.
"""

from __future__ import annotations

import ast
import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..config import OutputMode
from ..errors import EmitError, OutputExistsError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic writes of a batch of files with validation.

    Uses a two-phase commit approach:
    1. Validate every file and write each to a temporary file in its target directory
    2. Atomically replace the target files

    If anything fails before the second phase, no target file is touched.
    """

    def __init__(
        self,
        mode: OutputMode = OutputMode.ERROR_IF_EXISTS,
        validate_python: Callable[[str, Path], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            mode: How to handle existing files whose content differs
            validate_python: Optional validation function for Python code
        """
        self.mode = mode
        self._validate_python = validate_python or self._default_validate_python

    def write_all(self, files: dict[Path, str], validate: bool = True) -> list[Path]:
        """Write a batch of files atomically.

        Args:
            files: Mapping from target path to content
            validate: Whether to validate before finalizing

        Returns:
            Paths that were created or changed, in input order

        Raises:
            EmitError: If validation fails
            OutputExistsError: If a file exists with other content and mode is ERROR_IF_EXISTS
            OSError: If file operations fail
        """
        pending: dict[Path, str] = {}
        for path, content in files.items():
            if validate and path.suffix == ".py":
                self._validate_python(content, path)
            if path.exists():
                existing = path.read_text(encoding="utf-8")
                if existing == content:
                    logger.debug("Unchanged %s", path)
                    continue
                if self.mode == OutputMode.ERROR_IF_EXISTS:
                    raise OutputExistsError(f"Output file already exists with different content: {path}. Use force mode to overwrite.")
            pending[path] = content

        temp_paths: dict[Path, Path] = {}
        try:
            for path, content in pending.items():
                temp_paths[path] = self._write_temp(path, content)
        except Exception:
            self._cleanup(temp_paths.values())
            raise

        # On POSIX systems, replace() is atomic when source and target share a filesystem
        for path, temp_path in temp_paths.items():
            temp_path.replace(path)
            logger.info("Wrote %s", path)

        return list(pending)

    def write(self, path: Path, content: str, validate: bool = True) -> bool:
        """Write a single file atomically. Returns whether it changed."""
        return bool(self.write_all({path: content}, validate))

    def _write_temp(self, path: Path, content: str) -> Path:
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
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise
        return temp_path

    def _cleanup(self, temp_paths) -> None:
        for temp_path in temp_paths:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove temporary file %s", temp_path)

    def _default_validate_python(self, content: str, path: Path) -> None:
        """Default Python validation.

        Raises:
            EmitError: If the content does not parse as Python
        """
        try:
            ast.parse(content, filename=str(path))
        except SyntaxError as e:
            raise EmitError(f"Generated Python code is not valid: {e}", str(path)) from e

"""
Atomic file writer for generated outputs.

Ensures that an interrupted write never leaves a half-written schema or
documentation file behind.
"""

from __future__ import annotations

import json
import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import OutputWriteError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_json: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_json: Optional validation function for JSON output
        """
        self._validate_json = validate_json or self._default_validate_json

    def write(self, path: Path, content: str, file_format: str = "text", validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            file_format: "json" enables JSON validation, anything else is written as is
            validate: Whether to validate before finalizing

        Raises:
            OutputWriteError: If validation or a file operation fails
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Same directory ensures atomic rename on the same filesystem
            temp_fd, temp_path_str = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                text=True,
            )
        except OSError as e:
            raise OutputWriteError(f"Cannot write {path}: {e}") from e

        temp_path = Path(temp_path_str)
        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate and file_format == "json":
                self._validate_json(content)

            temp_path.replace(path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise OutputWriteError(f"Cannot write {path}: {e}") from e
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

        logger.info("Wrote %s", path)

    def _default_validate_json(self, content: str) -> None:
        """Default JSON validation.

        Raises:
            OutputWriteError: If the content is not a JSON object
        """
        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise OutputWriteError(f"Generated JSON is not valid: {e}") from e

        if not isinstance(document, dict):
            raise OutputWriteError("Generated JSON Schema must be an object")

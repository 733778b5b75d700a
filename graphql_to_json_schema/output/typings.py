"""
External compiler turning the JSON Schema into type declarations.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from ..config import DEFAULT_TYPINGS_COMMAND
from ..errors import TypingsCompilerError

logger = logging.getLogger(__name__)


class TypingsCompiler:
    """Runs an external JSON Schema compiler over stdin/stdout."""

    def __init__(self, command: list[str] | None = None, timeout: float = 120):
        """
        Initialize the compiler wrapper.

        Args:
            command: Command line of the compiler; it reads the schema on stdin
                and writes the declarations on stdout
            timeout: Timeout in seconds for the compiler process
        """
        self.command = list(command or DEFAULT_TYPINGS_COMMAND)
        self.timeout = timeout

    def is_available(self) -> bool:
        """Check if the compiler executable can be found."""
        return bool(self.command) and shutil.which(self.command[0]) is not None

    def compile(self, json_schema: str) -> str:
        """
        Compile a JSON Schema document.

        Args:
            json_schema: The serialized JSON Schema

        Returns:
            The generated type declarations

        Raises:
            TypingsCompilerError: If the compiler is missing or fails
        """
        if not self.is_available():
            raise TypingsCompilerError(f"Typings compiler not found: {' '.join(self.command) or '<empty command>'}")

        logger.debug("Running typings compiler: %s", " ".join(self.command))
        try:
            result = subprocess.run(
                self.command,
                input=json_schema,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.SubprocessError as e:
            raise TypingsCompilerError(f"Typings compiler failed: {e}") from e

        if result.returncode != 0:
            raise TypingsCompilerError(f"Typings compiler exited with status {result.returncode}: {result.stderr.strip()}")
        return result.stdout

"""
Cleaner base class and interfaces.

A cleaner describes one build ecosystem: how to recognise its projects, which
command removes their build output, and how to read that command's summary.
The traversal itself lives in the scanner, which works with any cleaner.
"""

import abc
import logging
import shutil
from typing import List, Optional

from cargocleaner.core.errors import FormatMismatchError
from cargocleaner.core.models import (
    CleanupResult,
    CleanupStatus,
    CommandResult,
    NoOpRemoved,
    ParsedOutput,
    Removed,
    Unparseable,
)
from cargocleaner.core.utils import run_command

# Set up logger
logger = logging.getLogger("cargocleaner.core")


class Cleaner(abc.ABC):
    """Abstract base class for all cleaners."""

    # Seconds to wait for the cleanup command, None waits indefinitely
    timeout: Optional[int] = None

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Get the name of the cleaner."""
        pass

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """Get a description of what this cleaner does."""
        pass

    @property
    @abc.abstractmethod
    def manifest_name(self) -> str:
        """Name of the file that marks a project root."""
        pass

    @property
    @abc.abstractmethod
    def build_dir_name(self) -> str:
        """Name of the build-output directory inside a project root."""
        pass

    @property
    @abc.abstractmethod
    def command(self) -> List[str]:
        """Command run inside a project root to remove its build output."""
        pass

    @abc.abstractmethod
    def parse_output(self, result: CommandResult) -> ParsedOutput:
        """
        Read the summary printed by a successful cleanup command.

        Args:
            result: The captured command result

        Returns:
            NoOpRemoved, Removed or Unparseable
        """
        pass

    def check_prerequisites(self) -> bool:
        """
        Check if the cleanup command is available.

        Returns:
            bool: True if prerequisites are met, False otherwise
        """
        executable = self.command[0]
        if shutil.which(executable) is None:
            logger.error(
                f"'{executable}' was not found in PATH. Install it or make sure "
                f"it is on your PATH before running the {self.name} cleaner."
            )
            return False
        return True

    def invoke(self, path: str) -> CommandResult:
        """Run the cleanup command with ``path`` as the working directory."""
        return run_command(self.command, cwd=path, timeout=self.timeout)

    def clean_project(self, path: str) -> CleanupResult:
        """
        Clean a single eligible project.

        Args:
            path: The project root

        Returns:
            The cleanup result. A failed command yields a FAILED result.

        Raises:
            FormatMismatchError: If the command succeeded but its output is not understood
        """
        result = self.invoke(path)
        if not result.succeeded:
            logger.warning(f"{' '.join(self.command)} failed in {path} (exit code {result.returncode})")
            return CleanupResult(path, CleanupStatus.FAILED)

        parsed = self.parse_output(result)
        if isinstance(parsed, NoOpRemoved):
            logger.info(f"Nothing to remove in {path}")
            return CleanupResult(path, CleanupStatus.NOOP)
        if isinstance(parsed, Unparseable):
            raise FormatMismatchError(path, parsed.text)
        if isinstance(parsed, Removed):
            return CleanupResult(path, CleanupStatus.CLEANED,
                                 files_removed=parsed.files, size_kib=parsed.size_kib)
        raise TypeError(f"Unexpected parse result: {parsed!r}")

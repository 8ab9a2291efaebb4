"""
Filesystem access used by the scanner and the project detector.

The scanner only needs to list subdirectories and look at a few paths, so
that is all this interface offers. Tests substitute an in-memory
implementation.
"""

import abc
import logging
import os
from typing import List, Optional

logger = logging.getLogger("cargocleaner.core.filesystem")


class FileSystem(abc.ABC):
    """Abstract directory listing and stat capability."""

    @abc.abstractmethod
    def list_subdirs(self, path: str) -> List[str]:
        """
        List the immediate subdirectories of a directory.

        Args:
            path: Directory to list

        Returns:
            Full paths of the subdirectories, sorted by name. Symbolic links
            are not included.

        Raises:
            OSError: If the directory cannot be read
        """
        pass

    @abc.abstractmethod
    def is_file(self, path: str) -> bool:
        pass

    @abc.abstractmethod
    def is_dir(self, path: str) -> bool:
        pass

    @abc.abstractmethod
    def mtime(self, path: str) -> Optional[float]:
        """Return the modification time as a POSIX timestamp, or None if unavailable."""
        pass


class LocalFileSystem(FileSystem):
    """FileSystem backed by the operating system."""

    def list_subdirs(self, path: str) -> List[str]:
        subdirs = []
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        subdirs.append(entry.path)
                except OSError as e:
                    logger.debug(f"Skipping unreadable entry {entry.path}: {e}")
        return sorted(subdirs)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def mtime(self, path: str) -> Optional[float]:
        try:
            return os.stat(path).st_mtime
        except OSError as e:
            logger.debug(f"Could not read modification time of {path}: {e}")
            return None

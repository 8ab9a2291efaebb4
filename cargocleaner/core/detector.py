"""Project detection and age filtering."""

import logging
import os
from datetime import datetime
from typing import Optional

from cargocleaner.core.filesystem import FileSystem, LocalFileSystem
from cargocleaner.core.models import Classification

logger = logging.getLogger("cargocleaner.core.detector")


class ProjectDetector:
    """
    Decide whether a directory is a cleanable project old enough to clean.

    A directory is a project when it holds both the manifest file and the
    build-output directory at its top level. Its own modification time is
    compared against the cutoff; when it cannot be read the project is
    treated as eligible.
    """

    def __init__(self, manifest_name: str, build_dir_name: str,
                 filesystem: Optional[FileSystem] = None):
        self.manifest_name = manifest_name
        self.build_dir_name = build_dir_name
        self.filesystem = filesystem or LocalFileSystem()

    def is_project(self, path: str) -> bool:
        return (self.filesystem.is_file(os.path.join(path, self.manifest_name))
                and self.filesystem.is_dir(os.path.join(path, self.build_dir_name)))

    def classify(self, path: str, cutoff: datetime) -> Classification:
        """
        Classify a candidate directory.

        Args:
            path: Directory to check
            cutoff: Projects modified after this instant are left alone

        Returns:
            The classification of the directory
        """
        if not self.is_project(path):
            return Classification.NOT_A_PROJECT

        mtime = self.filesystem.mtime(path)
        if mtime is None:
            logger.debug(f"No modification time for {path}, treating as eligible")
            return Classification.ELIGIBLE

        modified = datetime.fromtimestamp(mtime)
        if modified > cutoff:
            logger.info(f"Skipping {path}: modified {modified:%Y-%m-%d %H:%M}, after {cutoff:%Y-%m-%d %H:%M}")
            return Classification.TOO_RECENT

        return Classification.ELIGIBLE

"""
Directory traversal that finds and cleans projects.

The scanner walks a directory tree depth-first, asks the detector about every
directory, runs the cleaner on eligible projects and folds the results into a
CleanupStats. Everything happens sequentially in the calling thread.
"""

import logging
from datetime import datetime
from typing import Iterator, Optional, Set

from cargocleaner.core.cleaner import Cleaner
from cargocleaner.core.detector import ProjectDetector
from cargocleaner.core.errors import ScanError
from cargocleaner.core.filesystem import FileSystem, LocalFileSystem
from cargocleaner.core.models import Classification, CleanupResult, CleanupStats, CleanupStatus
from cargocleaner.core.report import Reporter

logger = logging.getLogger("cargocleaner.core.scanner")


class ProjectScanner:
    """Walks a directory tree and cleans the projects found in it."""

    def __init__(self, cleaner: Cleaner, reporter: Reporter,
                 filesystem: Optional[FileSystem] = None):
        self.cleaner = cleaner
        self.reporter = reporter
        self.filesystem = filesystem or LocalFileSystem()
        self.detector = ProjectDetector(cleaner.manifest_name, cleaner.build_dir_name, self.filesystem)

    def run(self, root: str, cutoff: datetime) -> CleanupStats:
        """
        Scan ``root`` and clean every project last modified at or before ``cutoff``.

        Args:
            root: Directory to scan
            cutoff: Projects modified after this instant are skipped

        Returns:
            The accumulated totals

        Raises:
            ScanError: If ``root`` is not a readable directory
            FormatMismatchError: If the cleanup command output is not understood
        """
        logger.info(f"Scanning {root} for {self.cleaner.name} projects not modified since {cutoff:%Y-%m-%d %H:%M:%S}")
        stats = CleanupStats()

        for path in self.walk(root):
            self.reporter.scanning(path)
            result = self.process(path, cutoff)
            if result.status is CleanupStatus.CLEANED:
                stats.add(result)
                self.reporter.cleaned(result)

        logger.info(f"Cleaned {stats.projects} projects, {stats.files} files, {stats.format_size()} total")
        self.reporter.finished(stats)
        return stats

    def process(self, path: str, cutoff: datetime) -> CleanupResult:
        """Classify one directory and clean it if it is eligible."""
        classification = self.detector.classify(path, cutoff)
        if classification is not Classification.ELIGIBLE:
            return CleanupResult(path, CleanupStatus.SKIPPED)

        logger.info(f"Cleaning {path}")
        return self.cleaner.clean_project(path)

    def walk(self, root: str) -> Iterator[str]:
        """
        Yield ``root`` and every directory below it in pre-order.

        Children are listed only after their parent has been yielded and
        processed, so directories removed by a cleanup are never entered.
        Directories that cannot be listed are skipped, except for ``root``.
        """
        if not self.filesystem.is_dir(root):
            raise ScanError(f"Not a directory: {root}")

        seen: Set[str] = set()
        stack = [root]
        while stack:
            path = stack.pop()
            if path in seen:
                continue
            seen.add(path)
            yield path

            try:
                children = self.filesystem.list_subdirs(path)
            except OSError as e:
                if path == root:
                    raise ScanError(f"Cannot read directory {root}: {e}") from e
                logger.debug(f"Skipping {path}: {e}")
                continue
            stack.extend(reversed(children))

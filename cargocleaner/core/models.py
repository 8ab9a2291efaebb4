"""Data types shared by the scanner, the cleaners and the reporters."""

import enum
from dataclasses import dataclass
from typing import Union

from cargocleaner.core.errors import CleanerError

# Multipliers converting a reported size unit into KiB
SIZE_UNITS = {
    "KiB": 1,
    "MiB": 1024,
    "GiB": 1024 * 1024,
}


class Classification(enum.Enum):
    """Outcome of checking a directory against the project markers and cutoff."""

    NOT_A_PROJECT = "not_a_project"
    TOO_RECENT = "too_recent"
    ELIGIBLE = "eligible"


class CleanupStatus(enum.Enum):
    SKIPPED = "skipped"
    NOOP = "noop"
    CLEANED = "cleaned"
    FAILED = "failed"


@dataclass(frozen=True)
class CommandResult:
    """Return code and captured output of an external command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class NoOpRemoved:
    """The cleanup command ran but had nothing to remove."""
    pass


@dataclass(frozen=True)
class Removed:
    """Files and size reported as removed by the cleanup command."""

    files: int
    size: float
    unit: str

    @property
    def size_kib(self) -> float:
        return self.size * SIZE_UNITS[self.unit]


@dataclass(frozen=True)
class Unparseable:
    """The cleanup command output did not match the expected summary."""

    text: str


ParsedOutput = Union[NoOpRemoved, Removed, Unparseable]


@dataclass(frozen=True)
class CleanupResult:
    """Outcome of processing one candidate directory."""

    path: str
    status: CleanupStatus
    files_removed: int = 0
    size_kib: float = 0.0


@dataclass
class CleanupStats:
    """Running totals for a scan, sizes kept in KiB."""

    projects: int = 0
    files: int = 0
    size_kib: float = 0.0

    def add(self, result: CleanupResult) -> None:
        """Fold a cleaned result into the totals."""
        if result.status is not CleanupStatus.CLEANED:
            raise CleanerError(f"Only cleaned results can be added, got {result.status.value}")
        self.projects += 1
        self.files += result.files_removed
        self.size_kib += result.size_kib

    def format_size(self) -> str:
        # utils imports this module
        from cargocleaner.core.utils import human_readable_size
        return human_readable_size(self.size_kib)

"""Exceptions raised by CargoCleaner."""

from typing import Optional


class CleanerError(Exception):
    """Base exception for cleaner-related errors."""
    pass


class ConfigError(CleanerError):
    """Exception raised for invalid command-line configuration."""
    pass


class InvalidFormatError(ConfigError):
    """The value part of a duration expression is not a non-negative integer."""
    pass


class UnknownUnitError(ConfigError):
    """The unit of a duration expression is not one of m, h, d, w."""
    pass


class ScanError(CleanerError):
    """Exception raised when the scan root cannot be read."""
    pass


class FormatMismatchError(CleanerError):
    """
    Exception raised when the cleanup command succeeded but its output could
    not be parsed.

    This usually means the installed tool prints a different summary than the
    one this version understands, so the run is aborted rather than reporting
    wrong totals.
    """

    def __init__(self, path: str, output: Optional[str] = None):
        self.path = path
        self.output = output
        super().__init__(f"Unexpected cleanup output in {path}: {(output or '').strip()!r}")

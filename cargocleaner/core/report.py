"""Reporting sink interface used by the scanner."""

import abc

from cargocleaner.core.models import CleanupResult, CleanupStats


class Reporter(abc.ABC):
    """Receives progress events from a scan."""

    @abc.abstractmethod
    def scanning(self, path: str) -> None:
        """Called for every directory visited."""
        pass

    @abc.abstractmethod
    def cleaned(self, result: CleanupResult) -> None:
        """Called for every project that had files removed."""
        pass

    @abc.abstractmethod
    def finished(self, stats: CleanupStats) -> None:
        """Called once with the final totals after a completed scan."""
        pass

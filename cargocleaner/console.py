"""
Console reporter using Rich.

Shows a spinner with the directory currently being scanned, prints one line
per cleaned project above it and replaces it with the summary at the end.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn
from rich.text import Text

from cargocleaner.core.models import CleanupResult, CleanupStats
from cargocleaner.core.report import Reporter
from cargocleaner.core.utils import human_readable_size

PREFIX_WIDTH = 12


class ConsoleReporter(Reporter):
    """Reporter rendering scan progress to the terminal"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True, highlight=False)
        self._progress: Optional[Progress] = None
        self._task: Optional[TaskID] = None

    def _prefixed(self, prefix: str, message: str) -> Text:
        text = Text(f"{prefix:>{PREFIX_WIDTH}}", style="bold green")
        text.append(f" {message}")
        return text

    def _start(self):
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold green]{task.fields[prefix]:>12}[/bold green] {task.description}"),
            console=self.console,
            transient=True,
        )
        self._progress.start()
        self._task = self._progress.add_task("", prefix="Scanning")

    def scanning(self, path: str) -> None:
        if self._progress is None:
            self._start()
        self._progress.update(self._task, description=escape(path))

    def cleaned(self, result: CleanupResult) -> None:
        self.console.print(self._prefixed(
            "Removed",
            f"{result.files_removed} files, {human_readable_size(result.size_kib)} total in {result.path}",
        ))

    def finished(self, stats: CleanupStats) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task = None
        self.console.print(self._prefixed(
            "Cleaned",
            f"{stats.projects} projects, {stats.files} files, {stats.format_size()} total",
        ))

    def close(self) -> None:
        """Stop the spinner if a scan was interrupted"""
        if self._progress is not None:
            self._progress.stop()
            self._progress = None

"""Shared fixtures for the CargoCleaner tests."""

import posixpath
import time
from typing import Dict, List, Optional, Set

import pytest

from cargocleaner.cleaners.cargo import CargoCleaner
from cargocleaner.core.filesystem import FileSystem
from cargocleaner.core.models import CommandResult
from cargocleaner.core.report import Reporter


class FakeFileSystem(FileSystem):
    """In-memory filesystem keyed by POSIX paths."""

    def __init__(self):
        self.dirs: Dict[str, Optional[float]] = {}
        self.files: Set[str] = set()
        self.unreadable: Set[str] = set()
        self.listed: List[str] = []

    def add_dir(self, path: str, mtime: Optional[float] = None) -> None:
        if mtime is None:
            mtime = time.time()
        while path not in ("", "/") and path not in self.dirs:
            self.dirs[path] = mtime
            path = posixpath.dirname(path)

    def add_file(self, path: str) -> None:
        self.add_dir(posixpath.dirname(path))
        self.files.add(path)

    def add_project(self, path: str, mtime: Optional[float] = None, target: bool = True) -> None:
        self.add_dir(path, mtime)
        self.add_file(posixpath.join(path, "Cargo.toml"))
        if target:
            self.add_dir(posixpath.join(path, "target", "debug"))
        # path may already exist as the parent of an earlier entry
        self.dirs[path] = mtime if mtime is not None else self.dirs[path]

    def remove_tree(self, path: str) -> None:
        prefix = path + "/"
        self.dirs = {d: m for d, m in self.dirs.items() if d != path and not d.startswith(prefix)}
        self.files = {f for f in self.files if not f.startswith(prefix)}

    def list_subdirs(self, path: str) -> List[str]:
        self.listed.append(path)
        if path in self.unreadable:
            raise PermissionError(f"Permission denied: {path}")
        if path not in self.dirs:
            raise FileNotFoundError(f"No such directory: {path}")
        return sorted(d for d in self.dirs if posixpath.dirname(d) == path)

    def is_file(self, path: str) -> bool:
        return path in self.files

    def is_dir(self, path: str) -> bool:
        return path in self.dirs

    def mtime(self, path: str) -> Optional[float]:
        return self.dirs.get(path)


class RecordingReporter(Reporter):
    """Reporter that keeps every event it receives."""

    def __init__(self):
        self.scanned = []
        self.cleaned_results = []
        self.finished_stats = []

    def scanning(self, path):
        self.scanned.append(path)

    def cleaned(self, result):
        self.cleaned_results.append(result)

    def finished(self, stats):
        self.finished_stats.append(stats)


class FakeCargoCleaner(CargoCleaner):
    """CargoCleaner whose command is answered from a table instead of a subprocess."""

    def __init__(self, filesystem: FakeFileSystem, outputs: Dict[str, CommandResult]):
        self.filesystem = filesystem
        self.outputs = outputs
        self.invoked: List[str] = []

    def invoke(self, path: str) -> CommandResult:
        self.invoked.append(path)
        result = self.outputs[path]
        if result.succeeded:
            self.filesystem.remove_tree(posixpath.join(path, self.build_dir_name))
        return result


def removed(files: int, size: str) -> CommandResult:
    """A successful cargo clean result reporting removed files."""
    return CommandResult(0, stderr=f"     Removed {files} files, {size} total\n")


@pytest.fixture
def fake_fs():
    return FakeFileSystem()


@pytest.fixture
def reporter():
    return RecordingReporter()

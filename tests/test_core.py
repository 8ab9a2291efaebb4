"""Tests for the core functionality of CargoCleaner."""

import pytest

from cargocleaner.core.cleaner import Cleaner
from cargocleaner.core.errors import CleanerError, FormatMismatchError
from cargocleaner.core.models import (
    CleanupResult,
    CleanupStats,
    CleanupStatus,
    CommandResult,
    NoOpRemoved,
    Removed,
    Unparseable,
)
from cargocleaner.core.utils import human_readable_size


def test_human_readable_size():
    """Test the human_readable_size function."""
    assert human_readable_size(0) == "0.00KiB"
    assert human_readable_size(1023.5) == "1023.50KiB"
    assert human_readable_size(1024) == "1.00MiB"
    assert human_readable_size(3584) == "3.50MiB"
    assert human_readable_size(1024 * 1024 - 1) == "1024.00MiB"
    assert human_readable_size(1024 * 1024) == "1.00GiB"
    assert human_readable_size(5 * 1024 * 1024 * 1024) == "5120.00GiB"


class MockCleaner(Cleaner):
    """Mock cleaner for testing."""

    def __init__(self, result, parsed=None):
        self.result = result
        self.parsed = parsed
        self.invoked = []

    @property
    def name(self):
        return "mock"

    @property
    def description(self):
        return "Mock cleaner for testing"

    @property
    def manifest_name(self):
        return "mock.toml"

    @property
    def build_dir_name(self):
        return "out"

    @property
    def command(self):
        return ["mock-tool", "clean"]

    def invoke(self, path):
        self.invoked.append(path)
        return self.result

    def parse_output(self, result):
        return self.parsed


def test_clean_project_removed():
    cleaner = MockCleaner(CommandResult(0), Removed(files=3, size=2.0, unit="MiB"))

    result = cleaner.clean_project("/src/app")

    assert result == CleanupResult("/src/app", CleanupStatus.CLEANED, files_removed=3, size_kib=2048.0)
    assert cleaner.invoked == ["/src/app"]


def test_clean_project_noop():
    cleaner = MockCleaner(CommandResult(0), NoOpRemoved())

    assert cleaner.clean_project("/src/app").status is CleanupStatus.NOOP


def test_clean_project_command_failure_is_not_parsed():
    cleaner = MockCleaner(CommandResult(101, stderr="error: could not find Cargo.toml"))

    result = cleaner.clean_project("/src/app")

    assert result.status is CleanupStatus.FAILED
    assert result.files_removed == 0
    assert result.size_kib == 0.0


def test_clean_project_unparseable_output_raises():
    cleaner = MockCleaner(CommandResult(0, stderr="Cleaned everything"), Unparseable("Cleaned everything"))

    with pytest.raises(FormatMismatchError) as excinfo:
        cleaner.clean_project("/src/app")

    assert excinfo.value.path == "/src/app"
    assert excinfo.value.output == "Cleaned everything"


def test_check_prerequisites(monkeypatch):
    cleaner = MockCleaner(CommandResult(0))

    monkeypatch.setattr("cargocleaner.core.cleaner.shutil.which", lambda name: None)
    assert cleaner.check_prerequisites() is False

    monkeypatch.setattr("cargocleaner.core.cleaner.shutil.which", lambda name: f"/usr/bin/{name}")
    assert cleaner.check_prerequisites() is True


def test_stats_accumulate_cleaned_results():
    stats = CleanupStats()
    stats.add(CleanupResult("/a", CleanupStatus.CLEANED, files_removed=12, size_kib=3584.0))
    stats.add(CleanupResult("/b", CleanupStatus.CLEANED, files_removed=3, size_kib=512.0))

    assert stats.projects == 2
    assert stats.files == 15
    assert stats.size_kib == 4096.0
    assert stats.format_size() == "4.00MiB"


@pytest.mark.parametrize("status", [CleanupStatus.SKIPPED, CleanupStatus.NOOP, CleanupStatus.FAILED])
def test_stats_reject_results_that_were_not_cleaned(status):
    stats = CleanupStats()

    with pytest.raises(CleanerError):
        stats.add(CleanupResult("/a", status))

    assert stats == CleanupStats()

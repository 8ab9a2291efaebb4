"""Cargo cleaner implementation for removing Rust build output."""

import logging
import re
from typing import List

from cargocleaner.core.cleaner import Cleaner
from cargocleaner.core.models import (
    CommandResult,
    NoOpRemoved,
    ParsedOutput,
    Removed,
    SIZE_UNITS,
    Unparseable,
)

logger = logging.getLogger("cargocleaner.cleaners.cargo")

NOOP_MARKER = "Removed 0 files"

SUMMARY_PATTERN = re.compile(
    r"Removed (?P<files>\d+) files, (?P<size>\d+(?:\.\d+)?)(?P<unit>" + "|".join(SIZE_UNITS) + r") total"
)


def parse_clean_output(text: str) -> ParsedOutput:
    """
    Parse the summary ``cargo clean`` prints to stderr.

    Args:
        text: The captured output, e.g. ``Removed 12 files, 3.50MiB total``

    Returns:
        NoOpRemoved if nothing was removed, Removed with the parsed numbers,
        or Unparseable if the summary is missing
    """
    if NOOP_MARKER in text:
        return NoOpRemoved()

    match = SUMMARY_PATTERN.search(text)
    if match is None:
        return Unparseable(text)

    return Removed(
        files=int(match.group("files")),
        size=float(match.group("size")),
        unit=match.group("unit"),
    )


class CargoCleaner(Cleaner):
    """Cleaner for the target directories of Cargo projects."""

    @property
    def name(self) -> str:
        return "cargo"

    @property
    def description(self) -> str:
        return "Runs cargo clean in Rust projects that have not been touched recently"

    @property
    def manifest_name(self) -> str:
        return "Cargo.toml"

    @property
    def build_dir_name(self) -> str:
        return "target"

    @property
    def command(self) -> List[str]:
        return ["cargo", "clean"]

    def parse_output(self, result: CommandResult) -> ParsedOutput:
        parsed = parse_clean_output(result.stderr)
        if isinstance(parsed, Unparseable):
            logger.debug(f"cargo clean stdout: {result.stdout.strip()}")
        return parsed

"""Utility functions for the CargoCleaner application."""

import os
import logging
import subprocess
import time
from datetime import datetime, timedelta
from typing import Optional, List

from cargocleaner.core.errors import InvalidFormatError, UnknownUnitError
from cargocleaner.core.models import CommandResult

logger = logging.getLogger("cargocleaner.utils")

# Seconds per duration unit accepted by --past
DURATION_UNITS = {
    "m": 60,
    "h": 60 * 60,
    "d": 60 * 60 * 24,
    "w": 60 * 60 * 24 * 7,
}


def run_command(command: List[str], cwd: Optional[str] = None,
                timeout: Optional[int] = None) -> CommandResult:
    """
    Run a command and capture both of its output streams.

    Args:
        command: The command and its arguments
        cwd: The working directory to run the command in
        timeout: Timeout in seconds for the command (default: no timeout)

    Returns:
        The command result. A command that could not be started or timed out
        is reported with a non-zero return code.
    """
    logger.debug(f"Running command: {' '.join(command)} in directory: {cwd or os.getcwd()}")

    start_time = time.time()
    try:
        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
            cwd=cwd,
            timeout=timeout
        )
    except subprocess.TimeoutExpired:
        logger.error(f"Command timed out after {timeout} seconds: {' '.join(command)}")
        return CommandResult(returncode=-1)
    except OSError as e:
        logger.error(f"Could not run command: {' '.join(command)} in directory: {cwd}, error: {e}")
        return CommandResult(returncode=-1, stderr=str(e))

    execution_time = time.time() - start_time
    logger.debug(f"Command exited with {result.returncode} in {execution_time:.2f} seconds")
    if result.returncode != 0:
        logger.debug(f"Command stderr: {result.stderr.strip()}")
    return CommandResult(returncode=result.returncode, stdout=result.stdout, stderr=result.stderr)


def parse_duration(expr: str) -> int:
    """
    Parse a relative time expression such as ``30m``, ``12h``, ``2d`` or ``1w``.

    Args:
        expr: A non-negative integer followed by one of the units m, h, d, w

    Returns:
        The duration in seconds

    Raises:
        InvalidFormatError: If the value before the unit is not a non-negative integer
        UnknownUnitError: If the unit is not one of m, h, d, w
    """
    value, unit = expr[:-1], expr[-1:]
    if not (value.isascii() and value.isdigit()):
        raise InvalidFormatError(f"Invalid duration '{expr}': expected a number followed by a unit")

    if unit not in DURATION_UNITS:
        raise UnknownUnitError(f"Unknown unit '{unit}', available units: {', '.join(DURATION_UNITS)}")

    return int(value) * DURATION_UNITS[unit]


def compute_cutoff(seconds: int, now: Optional[datetime] = None) -> datetime:
    """Return the instant ``seconds`` before ``now``."""
    if now is None:
        now = datetime.now()
    return now - timedelta(seconds=seconds)


def human_readable_size(size_kib: float) -> str:
    """
    Convert a size in KiB to human-readable format.

    Args:
        size_kib: Size in KiB

    Returns:
        Human-readable size string (e.g., "3.50MiB")
    """
    if size_kib >= 1024 * 1024:
        return f"{size_kib / 1024 / 1024:.2f}GiB"
    if size_kib >= 1024:
        return f"{size_kib / 1024:.2f}MiB"
    return f"{size_kib:.2f}KiB"

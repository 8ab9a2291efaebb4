#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Command-line interface for CargoCleaner.

This module provides the main command-line interface for the CargoCleaner tool,
using argparse to parse arguments.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from cargocleaner.cleaners import CargoCleaner
from cargocleaner.console import ConsoleReporter
from cargocleaner.core.errors import CleanerError, ConfigError
from cargocleaner.core.scanner import ProjectScanner
from cargocleaner.core.utils import compute_cutoff, parse_duration
from cargocleaner import __version__

# Configure logging
logger = logging.getLogger("cargocleaner")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: Whether to enable verbose logging (INFO level)
        debug: Whether to enable debug logging (DEBUG level)
    """
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = logging.ERROR

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Configure root logger
    logging.basicConfig(level=log_level, format=log_format)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the command-line argument parser.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="CargoCleaner - run cargo clean on every Rust project below a directory"
    )
    parser.add_argument(
        "--version", action="version", version=f"CargoCleaner {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging (INFO level)"
    )
    parser.add_argument(
        "-X", "--debug", action="store_true", help="Enable debug logging (DEBUG level)"
    )
    parser.add_argument(
        "dir", nargs="?", default=None,
        help="Base directory to run cleanup scan (default: current directory)"
    )
    parser.add_argument(
        "-p", "--past", default="0m",
        help="Only clean projects that haven't been touched for a certain period, "
             "available units: m, h, d, w (default: 0m)"
    )
    return parser


def run_scan(root: str, past: str) -> int:
    """
    Clean all projects below ``root`` untouched for the ``past`` duration.

    Args:
        root: Directory to scan
        past: Duration expression such as 2d

    Returns:
        Exit code
    """
    try:
        cutoff = compute_cutoff(parse_duration(past))
    except ConfigError as e:
        logger.error(f"Invalid --past value: {e}")
        return 1

    cleaner = CargoCleaner()
    if not cleaner.check_prerequisites():
        return 1

    reporter = ConsoleReporter()
    scanner = ProjectScanner(cleaner, reporter)
    try:
        scanner.run(root, cutoff)
    except CleanerError as e:
        logger.error(f"Error running {cleaner.name} cleaner: {e}")
        logger.debug("Exception details:", exc_info=True)
        return 1
    finally:
        reporter.close()
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the application.

    Args:
        args: Command-line arguments (if None, use sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_parser()
    if args is None:
        parser.prog = os.path.basename(sys.argv[0]) if sys.argv else "cargo-cleaner"
    else:
        parser.prog = "cargo-cleaner"

    parsed_args = parser.parse_args(args)

    # Set up logging
    setup_logging(parsed_args.verbose, parsed_args.debug)

    root = os.path.abspath(parsed_args.dir or os.getcwd())
    try:
        return run_scan(root, parsed_args.past)
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())

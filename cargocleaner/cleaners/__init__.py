"""Cleaner implementations for supported build ecosystems."""

from cargocleaner.cleaners.cargo import CargoCleaner, parse_clean_output

__all__ = ["CargoCleaner", "parse_clean_output"]

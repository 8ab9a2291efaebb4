"""Core scanning, detection and cleaning logic."""

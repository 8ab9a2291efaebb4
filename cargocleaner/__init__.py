"""
CargoCleaner - reclaim disk space from Rust projects

This tool walks a directory tree, finds Cargo projects that have not been
touched for a while and runs cargo clean on each of them.
"""

__version__ = "0.1.0"

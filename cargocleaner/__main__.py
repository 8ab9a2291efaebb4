#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main entry point for running CargoCleaner as a module.
Example: python -m cargocleaner
"""

import sys
from cargocleaner.cli import main

if __name__ == "__main__":
    sys.exit(main())

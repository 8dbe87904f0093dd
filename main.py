#!/bin/python
"""
Unified entry point for computing dependency-aware application hashes.

Equivalent to the installed `yeth` command; see `python main.py --help`.
"""
import sys

from Yeth.cli import main

if __name__ == "__main__":
    sys.exit(main())

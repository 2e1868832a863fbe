#!/usr/bin/env python3
"""
Entry point for lvmstate CLI tool.
"""

import sys

from lvmstate.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())

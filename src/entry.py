#!/usr/bin/env python3
"""Entry point for argsplit when packaged as zipapp."""

import sys

from argsplit.application import main

if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)

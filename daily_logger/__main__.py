#!/usr/bin/env python3
"""Main entry point for daily-logger when run as python -m daily_logger."""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Access Analytics - Entry point"""

import sys

from access_analytics.cli import main


if __name__ == "__main__":
    sys.exit(main())

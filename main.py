#!/usr/bin/env python3
"""Log Stats - Entry point"""

import sys

from logstats.cli import main


if __name__ == "__main__":
    sys.exit(main())

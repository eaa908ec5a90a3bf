#!/usr/bin/env python3
"""Host Stats - Entry point"""

import sys

from hoststats.cli import main

if __name__ == "__main__":
    sys.exit(main())

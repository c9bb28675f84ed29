#!/usr/bin/env python3
"""
canonical_data_syncer.__main__ - Module entry point
"""

import sys

from .main import main


if __name__ == "__main__":
    sys.exit(main())

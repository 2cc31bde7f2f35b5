#!/usr/bin/env python3
"""Compare returning and raising error handlers on a max search.

Usage:
    python scripts/compare_error_handling.py
    python scripts/compare_error_handling.py --variant index
    python scripts/compare_error_handling.py --log-path /tmp/log.txt -v
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from fallible.cli import main


if __name__ == "__main__":
    sys.exit(main())

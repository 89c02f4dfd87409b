#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py ../fixtures/puzzle04.txt
    python main.py --random 3 -f rich
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle.cli import app  # noqa: E402

if __name__ == "__main__":
    app()

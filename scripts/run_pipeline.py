#!/usr/bin/env python3
"""anaviz pipeline runner.

Usage:
    python scripts/run_pipeline.py data/samples.json
    python scripts/run_pipeline.py data/samples.csv --analyzer parable --format png
    python scripts/run_pipeline.py --config scripts/user_config.py
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from anaviz.cli import main


if __name__ == "__main__":
    sys.exit(main())

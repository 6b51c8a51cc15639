"""
run_stylize.py: CLI Entry Point

Forwards to the command-line logic in `src/style_transfer_lite/cli.py`
so the tool can be run from a source checkout without installing it or
touching PYTHONPATH.

Usage:
    python run_stylize.py --content photo.jpg --style path/to/style.jpg [options]
    python run_stylize.py --list-styles --styles-dir assets/thumbnails
"""
import sys
from pathlib import Path

# Source code in src/ subdirectory
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import style_transfer_lite.cli as stl_cli  # noqa: E402

if __name__ == "__main__":
    stl_cli.main()

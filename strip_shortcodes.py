#!/usr/bin/env python3
"""
Shortcode Stripper - remove page-builder shortcodes from exported content

Simple usage:
    python strip_shortcodes.py /folder/path         # Rewrites every document in folder
    python strip_shortcodes.py posts.json --dry-run # Preview changes to a JSON export
    python strip_shortcodes.py /folder -m vc_row    # Strip only [vc_row] shortcodes
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from shortcode_stripper.cli import app

if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""
main.py - Quick-start entry point.

Drop images into ``images/`` and run:

    python main.py batch -p "rose-pine"

Or use the CLI directly:

    python -m palette_recolor.cli palettes gruvbox
    python -m palette_recolor.cli convert my_photo.jpg -p "catppuccin-mocha"
"""

from palette_recolor.cli import app

if __name__ == "__main__":
    app()

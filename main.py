#!/usr/bin/env python3
"""Hacksaw - a small terminal text editor.

Usage:
    python main.py [filename]

Controls:
    Arrow keys: Move the cursor
    Home/End, PageUp/PageDown: Jump within the line / by a screen
    Ctrl-S: Save file (asks for a name if the file has none)
    Ctrl-Q: Quit
    Type to insert text
    Backspace: Delete character
    Enter: Split the line
"""

import sys
from hacksaw.__main__ import main


if __name__ == "__main__":
    sys.exit(main())

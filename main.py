#!/usr/bin/env python3
"""
Standalone entry point for the keystretch CLI.

Lets `python main.py ...` and PyInstaller builds run the CLI without
installing the package first.
"""

import os
import sys

if getattr(sys, 'frozen', False):
    # PyInstaller unpacks bundled modules here
    bundle_dir = sys._MEIPASS
else:
    bundle_dir = os.path.dirname(os.path.abspath(__file__))

sys.path.insert(0, bundle_dir)

if __name__ == "__main__":
    from keystretch.cli import main
    sys.exit(main())

#!/usr/bin/env python3
"""
Image to ASCII Converter
========================
Command line entry point. See ``image_to_ascii.cli`` for the options.

Usage:
    python main.py [options] IMAGE
"""

import sys

from image_to_ascii.cli import main


if __name__ == '__main__':
    sys.exit(main())

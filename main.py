#!/usr/bin/env python3
"""
Console Minesweeper - Main entry point.

Usage:
    python main.py [--level {easy,medium,hard}] [--seed N] [--verbose]
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())

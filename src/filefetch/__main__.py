"""
filefetch CLI entry point.

Usage:
    python -m filefetch get docs readme.txt --root ./docs
"""

from filefetch.cli import main

if __name__ == "__main__":
    main()

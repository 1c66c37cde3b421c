"""
Main entry point for running csgrid as a module.

Usage:
    python -m csgrid --input page.json [options]
"""

from .arranger import main

if __name__ == "__main__":
    import sys

    sys.exit(main())

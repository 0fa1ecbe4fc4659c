"""
Main entry point for the outlink_extractor package.

Allows running the extractor as: python -m outlink_extractor
"""

import sys

from outlink_extractor.cli import main

if __name__ == "__main__":
    sys.exit(main())

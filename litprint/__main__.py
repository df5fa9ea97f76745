"""
Run the command line front end.

Usage:
    python -m litprint data.json
    python -m litprint --help
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())

"""
Entry point for running regparse as a module.

Usage:
    python -m regparse parse "a(b|c)*"
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())

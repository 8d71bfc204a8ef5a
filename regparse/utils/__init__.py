"""
Utility modules for regparse.

This package contains settings shared by the parser and the command-line tools.
"""

from .settings import Settings, DEFAULT_SETTINGS

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
]

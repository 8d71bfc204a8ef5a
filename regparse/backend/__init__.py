"""
Backend module for regparse.

This module renders parsed trees as text or as JSON-ready data.
"""

from .printer import format_tree, describe_symbol, to_dict

__all__ = [
    "format_tree",
    "describe_symbol",
    "to_dict",
]

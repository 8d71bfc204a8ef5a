"""
Configuration settings for regparse.

This module contains default configuration values and settings used
throughout the parser and the command-line tools.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Parser and output settings.

    Attributes:
        max_group_depth: Deepest allowed nesting of '(...)' groups. Each level
            costs a handful of Python stack frames, so this keeps parsing well
            under the interpreter's recursion limit.
        output_format: How trees are rendered ("tree" or "json")
        valid_formats: List of valid output formats
        indent: Indentation width used when rendering
    """
    max_group_depth: int = 100
    output_format: str = "tree"
    valid_formats: List[str] = None
    indent: int = 2

    def __post_init__(self):
        if self.valid_formats is None:
            self.valid_formats = ["tree", "json"]
        if self.output_format not in self.valid_formats:
            raise ValueError(f"Invalid output format: {self.output_format}")
        if self.max_group_depth < 0:
            raise ValueError(f"max_group_depth must not be negative: {self.max_group_depth}")

    @property
    def format_choices(self) -> List[str]:
        """Get the list of valid output formats."""
        return self.valid_formats


# Global default settings instance
DEFAULT_SETTINGS = Settings()

"""
Core functionality exports for reqlint.

Importing from here keeps user-facing imports clean and stable:

    from reqlint.core import RequirementsLinter, parse_requirement
"""

from __future__ import annotations

from reqlint.core.parser import parse_requirement, split_lines
from reqlint.core.duplicates import scan_duplicates
from reqlint.core.ordering import natural_compare, natural_key, scan_sorted
from reqlint.core.linter import RequirementsLinter

__all__ = [
    "parse_requirement",
    "split_lines",
    "scan_duplicates",
    "scan_sorted",
    "natural_compare",
    "natural_key",
    "RequirementsLinter",
]

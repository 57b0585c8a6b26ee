"""
reqlint: a requirements.txt linter.

Reports duplicate package declarations and specifiers that are not listed
in case-insensitive natural sort order. Usable as a library, as a lint
host plugin through :class:`reqlint.core.RequirementsLinter`, or from the
command line (``reqlint lint``).
"""

from __future__ import annotations

from reqlint.__version__ import __version__
from reqlint.core import (
    RequirementsLinter,
    parse_requirement,
    scan_duplicates,
    scan_sorted,
    split_lines,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__license__ = "Apache-2.0"
__description__ = "Ensures package requirements are sorted and unique."

__all__ = [
    "__version__",
    "RequirementsLinter",
    "parse_requirement",
    "scan_duplicates",
    "scan_sorted",
    "split_lines",
]

"""
Utility helpers for reqlint.

This package provides reusable utilities used across reqlint:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Filesystem read and discovery helpers

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from reqlint.utils.logger import (
    get_logger,
    level_for_verbosity,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Filesystem utilities
# ---------------------------------------------------------------------------

from reqlint.utils.filesystem import (
    expand_paths,
    find_requirements_files,
    safe_read_file,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from reqlint.utils.console import (
    colorize_severity,
    get_raw_console,
    print_error,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)

__all__ = [
    # Console
    "print_error",
    "print_table",
    "print_success",
    "print_warning",
    "get_raw_console",
    "reconfigure_console",
    "colorize_severity",
    # Logging
    "get_logger",
    "setup_logging",
    "level_for_verbosity",
    # Filesystem
    "safe_read_file",
    "expand_paths",
    "find_requirements_files",
]

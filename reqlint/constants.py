"""
Centralized constants for reqlint.

This module defines immutable values used across reqlint, including linter
identification metadata, default severities, file patterns, and logging
formats. All values are intended to be treated as read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# Linter identification
# ---------------------------------------------------------------------------

#: Human-readable linter name shown by hosts.
LINTER_INFO_NAME: Final[str] = "Python requirements.txt Linter"

#: One-line description of what the linter checks.
LINTER_INFO_DESCRIPTION: Final[str] = (
    "Ensures package requirements are sorted and unique."
)

#: Reference documentation for the file format being linted.
LINTER_INFO_URI: Final[str] = (
    "https://pip.readthedocs.org/en/latest/user_guide/#requirements-files"
)

#: Machine-readable short name used in lint reports.
LINTER_NAME: Final[str] = "REQUIREMENTS-TXT"

#: Key used to reference this linter from host configuration.
LINTER_CONFIGURATION_NAME: Final[str] = "requirements-txt"

# ---------------------------------------------------------------------------
# Lint messages
# ---------------------------------------------------------------------------

#: Message template for duplicate findings (package, first line, first text).
DUPLICATE_MESSAGE_TEMPLATE: Final[str] = (
    'This line contains a duplicate package requirement for "{package}". '
    'The first reference appears on line {line}: "{text}"'
)

#: Fixed message for unsorted findings.
UNSORTED_MESSAGE: Final[str] = (
    "This line doesn't appear in sorted order. Please keep "
    "package requirements ordered alphabetically."
)

#: Column every finding is anchored to.
FINDING_COLUMN: Final[int] = 1

# ---------------------------------------------------------------------------
# Requirement file patterns
# ---------------------------------------------------------------------------

#: Glob patterns used to detect requirement files inside a directory.
REQUIREMENT_FILE_PATTERNS: Final[Sequence[str]] = (
    "requirements.txt",
    "requirements-*.txt",
    "requirements/*.txt",
)

#: Default file linted when no path is given on the command line.
DEFAULT_REQUIREMENTS_FILE: Final[str] = "requirements.txt"

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Config file searched for in the current directory.
CONFIG_FILE_NAME: Final[str] = "reqlint.toml"

#: Environment variable holding an explicit config path.
CONFIG_ENV_VAR: Final[str] = "REQLINT_CONFIG"

# ---------------------------------------------------------------------------
# Security constraints
# ---------------------------------------------------------------------------

#: Maximum allowed file size (in bytes) when reading requirement files.
MAX_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10 MB

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

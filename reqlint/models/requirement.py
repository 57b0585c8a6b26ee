"""
Requirement data model for reqlint.

This module defines the structured form of a single specifier line, as
extracted by :func:`reqlint.core.parser.parse_requirement`, together with
the numbered line records the scanners walk over.
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class Comparator(str, Enum):
    """Version comparison operators recognized in a specifier line."""

    COMPATIBLE = "~="
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS_EQUAL = "<="
    GREATER_EQUAL = ">="
    LESS = "<"
    GREATER = ">"
    ARBITRARY = "==="


@dataclass(frozen=True)
class Requirement:
    """
    A package name with an optional version constraint.

    Attributes:
        name: Package identifier exactly as written in the manifest.
        comparator: Version operator, or ``None`` for a bare name.
        version: Version string; present if and only if ``comparator`` is.

    Raises:
        ValueError: ``comparator`` and ``version`` are not both set or
            both absent.
    """

    name: str
    comparator: Optional[Comparator] = None
    version: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.comparator is None) != (self.version is None):
            raise ValueError(
                "Requirement comparator and version must be set together "
                f"(name={self.name!r}, comparator={self.comparator!r}, "
                f"version={self.version!r})"
            )

    @property
    def normalized_name(self) -> str:
        """Lower-cased name used for duplicate detection."""
        return self.name.lower()


@dataclass(frozen=True)
class LineRecord:
    """A trimmed manifest line and its 1-based line number."""

    number: int
    text: str

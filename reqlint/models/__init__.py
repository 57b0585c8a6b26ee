"""
Unified data model exports for reqlint.

Users can import models directly from ``reqlint.models`` instead of the
individual submodules.

Example:
    >>> from reqlint.models import Requirement, Finding, FindingKind
"""

from __future__ import annotations

from reqlint.models.requirement import Comparator, LineRecord, Requirement
from reqlint.models.finding import Finding, FindingKind, Severity

__all__ = [
    "Comparator",
    "LineRecord",
    "Requirement",
    "Finding",
    "FindingKind",
    "Severity",
]

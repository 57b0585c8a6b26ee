"""
Finding data model for reqlint.

A :class:`Finding` is one reported defect, anchored to a line of the
manifest. Scanners create findings with a kind and message only; the
linter adapter fills in the severity and path before handing them to the
reporting layer.
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from reqlint.constants import FINDING_COLUMN


class FindingKind(Enum):
    """The classes of defect reqlint reports.

    Each member carries a stable numeric code and a human-readable name.
    """

    DUPLICATE = (1, "Duplicate package requirement")
    UNSORTED = (2, "Unsorted package requirement")

    def __init__(self, code: int, title: str) -> None:
        self.code = code
        self.title = title

    @property
    def label(self) -> str:
        """Short lower-case label, as used in configuration and output."""
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "FindingKind":
        """Look up a kind by its configuration label (case-insensitive).

        Raises:
            ValueError: ``label`` does not name a finding kind.
        """
        try:
            return cls[label.strip().upper()]
        except KeyError:
            valid = ", ".join(kind.label for kind in cls)
            raise ValueError(
                f"Unknown finding kind {label!r} (expected one of: {valid})"
            ) from None


class Severity(str, Enum):
    """Severity levels a host can attach to a finding kind."""

    ERROR = "error"
    WARNING = "warning"
    ADVICE = "advice"
    DISABLED = "disabled"

    @property
    def is_enabled(self) -> bool:
        return self is not Severity.DISABLED

    @property
    def is_failure(self) -> bool:
        """Return True when findings at this level should fail a run."""
        return self is Severity.ERROR

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """Parse a configuration value such as ``"warning"``.

        Raises:
            ValueError: ``value`` is not a known severity.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unknown severity {value!r} (expected one of: {valid})"
            ) from None


@dataclass(frozen=True)
class Finding:
    """
    A single lint result.

    Attributes:
        line: 1-based line number the finding is anchored to.
        kind: Which check produced the finding.
        message: Human-readable explanation.
        bypass: Token a host may use to suppress this finding; the
            normalized package name for duplicates, ``None`` otherwise.
        column: Column of the finding; always 1.
        severity: Severity assigned by the host, if any.
        path: File the finding belongs to, if known.
    """

    line: int
    kind: FindingKind
    message: str
    bypass: Optional[str] = None
    column: int = FINDING_COLUMN
    severity: Optional[Severity] = None
    path: Optional[str] = None

    def with_context(
        self,
        *,
        severity: Optional[Severity] = None,
        path: Optional[str] = None,
    ) -> "Finding":
        """Return a copy with host-supplied severity and path attached."""
        return replace(
            self,
            severity=severity if severity is not None else self.severity,
            path=path if path is not None else self.path,
        )

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "path": self.path,
            "line": self.line,
            "column": self.column,
            "kind": self.kind.label,
            "code": self.kind.code,
            "name": self.kind.title,
            "severity": self.severity.value if self.severity else None,
            "message": self.message,
            "bypass": self.bypass,
        }

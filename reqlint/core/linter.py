"""Host-facing linter adapter.

:class:`RequirementsLinter` is the object a lint host registers: it carries
the identification metadata and default severities, decides which checks
run, and turns raw manifest content into severity-tagged findings. The
checks themselves live in :mod:`reqlint.core.duplicates` and
:mod:`reqlint.core.ordering`.

Typical usage::

    linter = RequirementsLinter()
    for finding in linter.lint_path("requirements.txt"):
        print(finding.line, finding.kind.title, finding.message)
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Union

from reqlint.config import ReqLintConfig
from reqlint.core.duplicates import scan_duplicates
from reqlint.core.ordering import scan_sorted
from reqlint.core.parser import split_lines
from reqlint.models.finding import Finding, FindingKind, Severity
from reqlint.models.requirement import LineRecord
from reqlint.utils.filesystem import safe_read_file
from reqlint.utils.logger import get_logger
from reqlint.constants import (
    LINTER_CONFIGURATION_NAME,
    LINTER_INFO_DESCRIPTION,
    LINTER_INFO_NAME,
    LINTER_INFO_URI,
    LINTER_NAME,
)

Scanner = Callable[[Iterable[LineRecord]], List[Finding]]

#: Checks in the order they run.
SCANNERS: Mapping[FindingKind, Scanner] = {
    FindingKind.DUPLICATE: scan_duplicates,
    FindingKind.UNSORTED: scan_sorted,
}

DEFAULT_SEVERITIES: Mapping[FindingKind, Severity] = {
    FindingKind.DUPLICATE: Severity.ERROR,
    FindingKind.UNSORTED: Severity.WARNING,
}


class RequirementsLinter:
    """Ensures Python package requirements are sorted and unique.

    Args:
        severity_overrides: Per-kind severities replacing the defaults.
            :attr:`Severity.DISABLED` turns a check off entirely.
        bypass: Bypass tokens whose findings are dropped from results.
    """

    info_name = LINTER_INFO_NAME
    info_description = LINTER_INFO_DESCRIPTION
    info_uri = LINTER_INFO_URI
    linter_name = LINTER_NAME
    configuration_name = LINTER_CONFIGURATION_NAME

    def __init__(
        self,
        *,
        severity_overrides: Optional[Mapping[FindingKind, Severity]] = None,
        bypass: Iterable[str] = (),
    ) -> None:
        self.logger = get_logger("core.linter")
        self._severities: Dict[FindingKind, Severity] = dict(DEFAULT_SEVERITIES)
        self._severities.update(severity_overrides or {})
        self._bypass = frozenset(token.lower() for token in bypass)

    @classmethod
    def from_config(cls, config: ReqLintConfig) -> "RequirementsLinter":
        """Build a linter from a loaded :class:`ReqLintConfig`."""
        return cls(severity_overrides=config.severity, bypass=config.bypass)

    # ------------------------------------------------------------------
    # Host metadata
    # ------------------------------------------------------------------

    def get_lint_severity_map(self) -> Dict[FindingKind, Severity]:
        """Return the default severity of each finding kind."""
        return dict(DEFAULT_SEVERITIES)

    def get_lint_name_map(self) -> Dict[FindingKind, str]:
        return {kind: kind.title for kind in FindingKind}

    def get_severity(self, kind: FindingKind) -> Severity:
        """Return the effective severity for ``kind`` after overrides."""
        return self._severities[kind]

    def is_message_enabled(self, kind: FindingKind) -> bool:
        return self.get_severity(kind).is_enabled

    # ------------------------------------------------------------------
    # Linting
    # ------------------------------------------------------------------

    def lint_text(self, content: str, path: Optional[str] = None) -> List[Finding]:
        """Lint manifest content.

        Disabled checks do no work. Findings are tagged with their
        effective severity and ``path``, findings whose bypass token is
        configured are dropped, and the result is ordered by line.

        Args:
            content: Full text of the manifest.
            path: Display path attached to every finding.

        Returns:
            Findings ordered by line number, then kind.
        """
        lines = split_lines(content)
        findings: List[Finding] = []

        for kind, scanner in SCANNERS.items():
            if not self.is_message_enabled(kind):
                self.logger.debug("Skipping disabled check: %s", kind.label)
                continue

            severity = self.get_severity(kind)
            raised = [
                finding.with_context(severity=severity, path=path)
                for finding in scanner(lines)
                if not self._is_bypassed(finding)
            ]
            self.logger.debug(
                "%s: %d %s finding(s)",
                path or "<text>",
                len(raised),
                kind.label,
            )
            findings.extend(raised)

        return sorted(findings, key=lambda f: (f.line, f.kind.code))

    def lint_path(self, path: Union[str, Path]) -> List[Finding]:
        """Read a manifest from disk and lint it.

        Raises:
            FileOperationError: The file is missing, unreadable or too large.
        """
        self.logger.info("Linting %s", path)
        content = safe_read_file(path)
        return self.lint_text(content, path=str(path))

    def _is_bypassed(self, finding: Finding) -> bool:
        return finding.bypass is not None and finding.bypass in self._bypass

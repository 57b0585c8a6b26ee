"""Unit tests for reqlint.core.duplicates."""

from __future__ import annotations

from typing import List

import pytest

from reqlint.core.duplicates import scan_duplicates
from reqlint.core.parser import split_lines
from reqlint.models.finding import FindingKind
from reqlint.models.requirement import LineRecord


def _records(*lines: str) -> List[LineRecord]:
    return [LineRecord(number=i, text=text) for i, text in enumerate(lines, start=1)]


@pytest.mark.unit
class TestScanDuplicates:
    """Tests for duplicate package detection."""

    def test_no_duplicates(self) -> None:
        assert scan_duplicates(_records("alpha==1.0", "beta==2.0", "gamma==3.0")) == []

    def test_empty_input(self) -> None:
        assert scan_duplicates([]) == []

    def test_case_insensitive_match(self) -> None:
        """``Flask`` and ``flask`` are the same package."""
        findings = scan_duplicates(_records("Flask", "flask"))

        assert len(findings) == 1
        assert findings[0].line == 2

    def test_finding_fields(self) -> None:
        findings = scan_duplicates(_records("Flask==1.0", "requests>=2.0", "flask==2.0"))

        assert len(findings) == 1
        finding = findings[0]
        assert finding.line == 3
        assert finding.column == 1
        assert finding.kind is FindingKind.DUPLICATE
        assert finding.bypass == "flask"
        assert finding.severity is None
        assert finding.message == (
            'This line contains a duplicate package requirement for "flask". '
            'The first reference appears on line 1: "Flask==1.0"'
        )

    def test_versions_do_not_matter(self) -> None:
        findings = scan_duplicates(_records("django>=3.2", "django<5", "Django"))

        assert [f.line for f in findings] == [2, 3]

    def test_every_finding_cites_first_occurrence(self) -> None:
        """Three declarations give two findings, both pointing at line 1."""
        findings = scan_duplicates(
            _records("six==1.0", "attrs", "six==1.1", "", "SIX==1.2")
        )

        assert [f.line for f in findings] == [3, 5]
        for finding in findings:
            assert 'line 1: "six==1.0"' in finding.message

    def test_k_occurrences_give_k_minus_one_findings(self) -> None:
        lines = ["pkg"] * 5 + ["other"]

        findings = scan_duplicates(_records(*lines))

        assert len(findings) == 4
        assert all("line 1" in f.message for f in findings)

    def test_independent_groups(self) -> None:
        findings = scan_duplicates(_records("a", "b", "a", "b", "c"))

        assert [(f.line, f.bypass) for f in findings] == [(3, "a"), (4, "b")]

    def test_non_requirement_lines_ignored(self) -> None:
        """Comments and blank lines never enter the seen-map."""
        findings = scan_duplicates(
            _records("# requests", "", "requests", "-r other.txt", "# requests")
        )

        assert findings == []

    def test_message_cites_first_raw_text(self) -> None:
        """The cited text is the full trimmed line, markers included."""
        findings = scan_duplicates(
            split_lines('  pytz>=2023; python_version < "3.9"\npytz\n')
        )

        assert len(findings) == 1
        assert findings[0].message.endswith(
            'line 1: "pytz>=2023; python_version < "3.9""'
        )

    def test_state_not_shared_between_calls(self) -> None:
        scan_duplicates(_records("flask"))

        assert scan_duplicates(_records("flask")) == []

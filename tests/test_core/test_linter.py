"""Unit tests for reqlint.core.linter.RequirementsLinter."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from reqlint.config import ReqLintConfig
from reqlint.core.linter import RequirementsLinter
from reqlint.exceptions import FileOperationError
from reqlint.models.finding import FindingKind, Severity

SAMPLE = "Flask==1.0\nrequests>=2.0\nflask==2.0\n"


@pytest.mark.unit
class TestLinterMetadata:
    """Tests for host-facing identification metadata."""

    def test_identification(self) -> None:
        linter = RequirementsLinter()

        assert linter.info_name == "Python requirements.txt Linter"
        assert linter.info_description == (
            "Ensures package requirements are sorted and unique."
        )
        assert linter.info_uri.startswith("https://pip.readthedocs.org/")
        assert linter.linter_name == "REQUIREMENTS-TXT"
        assert linter.configuration_name == "requirements-txt"

    def test_default_severity_map(self) -> None:
        assert RequirementsLinter().get_lint_severity_map() == {
            FindingKind.DUPLICATE: Severity.ERROR,
            FindingKind.UNSORTED: Severity.WARNING,
        }

    def test_name_map(self) -> None:
        assert RequirementsLinter().get_lint_name_map() == {
            FindingKind.DUPLICATE: "Duplicate package requirement",
            FindingKind.UNSORTED: "Unsorted package requirement",
        }

    def test_overrides_do_not_change_default_map(self) -> None:
        linter = RequirementsLinter(
            severity_overrides={FindingKind.UNSORTED: Severity.DISABLED}
        )

        assert linter.get_lint_severity_map()[FindingKind.UNSORTED] is Severity.WARNING
        assert linter.get_severity(FindingKind.UNSORTED) is Severity.DISABLED
        assert linter.is_message_enabled(FindingKind.UNSORTED) is False
        assert linter.is_message_enabled(FindingKind.DUPLICATE) is True


@pytest.mark.unit
class TestLintText:
    """Tests for RequirementsLinter.lint_text."""

    def test_both_checks_run(self) -> None:
        findings = RequirementsLinter().lint_text(SAMPLE, path="requirements.txt")

        assert [(f.line, f.kind) for f in findings] == [
            (1, FindingKind.UNSORTED),
            (3, FindingKind.DUPLICATE),
            (3, FindingKind.UNSORTED),
        ]

    def test_severity_and_path_attached(self) -> None:
        findings = RequirementsLinter().lint_text(SAMPLE, path="reqs.txt")

        for finding in findings:
            assert finding.path == "reqs.txt"
            expected = (
                Severity.ERROR
                if finding.kind is FindingKind.DUPLICATE
                else Severity.WARNING
            )
            assert finding.severity is expected

    def test_sorted_unique_file(self) -> None:
        findings = RequirementsLinter().lint_text("alpha==1.0\nbeta==2.0\ngamma==3.0\n")

        assert [(f.line, f.kind) for f in findings] == [(1, FindingKind.UNSORTED)]

    def test_empty_content(self) -> None:
        assert RequirementsLinter().lint_text("") == []

    def test_severity_override_applied(self) -> None:
        linter = RequirementsLinter(
            severity_overrides={FindingKind.DUPLICATE: Severity.ADVICE}
        )

        duplicates = [
            f for f in linter.lint_text(SAMPLE) if f.kind is FindingKind.DUPLICATE
        ]

        assert [f.severity for f in duplicates] == [Severity.ADVICE]

    @pytest.mark.parametrize(
        "disabled,remaining",
        [
            (FindingKind.DUPLICATE, FindingKind.UNSORTED),
            (FindingKind.UNSORTED, FindingKind.DUPLICATE),
        ],
    )
    def test_disabled_check_not_run(
        self, disabled: FindingKind, remaining: FindingKind
    ) -> None:
        linter = RequirementsLinter(severity_overrides={disabled: Severity.DISABLED})

        with patch.dict("reqlint.core.linter.SCANNERS", {disabled: _explode}):
            findings = linter.lint_text(SAMPLE)

        assert findings
        assert {f.kind for f in findings} == {remaining}

    def test_bypass_suppresses_duplicates(self) -> None:
        linter = RequirementsLinter(bypass=["FLASK"])

        findings = linter.lint_text(SAMPLE)

        assert FindingKind.DUPLICATE not in {f.kind for f in findings}
        assert len(findings) == 2

    def test_bypass_for_other_package_keeps_finding(self) -> None:
        linter = RequirementsLinter(bypass=["django"])

        findings = linter.lint_text(SAMPLE)

        assert FindingKind.DUPLICATE in {f.kind for f in findings}

    def test_from_config(self) -> None:
        config = ReqLintConfig(
            severity={FindingKind.UNSORTED: Severity.DISABLED},
            bypass=("flask",),
        )

        findings = RequirementsLinter.from_config(config).lint_text(SAMPLE)

        assert findings == []


@pytest.mark.unit
class TestLintPath:
    """Tests for RequirementsLinter.lint_path."""

    def test_reads_file(self, tmp_path: Path) -> None:
        manifest = tmp_path / "requirements.txt"
        manifest.write_text(SAMPLE, encoding="utf-8")

        findings = RequirementsLinter().lint_path(manifest)

        assert len(findings) == 3
        assert all(f.path == str(manifest) for f in findings)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileOperationError):
            RequirementsLinter().lint_path(tmp_path / "missing.txt")


def _explode(lines):
    raise AssertionError("disabled scanner must not run")


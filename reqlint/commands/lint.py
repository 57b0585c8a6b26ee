"""Lint command implementation for reqlint.

Runs the duplicate and sort-order checks over one or more requirements
files and reports the findings.

Typical usage::

    # Lint ./requirements.txt
    $ reqlint lint

    # Lint every requirements file under a directory, as JSON
    $ reqlint lint requirements/ --format json > report.json

    # Only look for duplicates
    $ reqlint lint --no-unsorted

    # Fail on warnings too (useful in CI)
    $ reqlint lint --strict
"""

from __future__ import annotations

import sys
import json
import click
from pathlib import Path
from typing import Any, Dict, List, Tuple

from reqlint.core import RequirementsLinter
from reqlint.models import Finding, FindingKind, Severity
from reqlint.exceptions import ReqLintError
from reqlint.constants import DEFAULT_REQUIREMENTS_FILE
from reqlint.context import pass_context, ReqLintContext
from reqlint.utils import (
    colorize_severity,
    expand_paths,
    get_logger,
    get_raw_console,
    print_error,
    print_success,
    print_table,
    print_warning,
)

logger = get_logger("commands.lint")


@click.command()
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["table", "simple", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@click.option(
    "--no-duplicates",
    is_flag=True,
    help="Skip the duplicate package check.",
)
@click.option(
    "--no-unsorted",
    is_flag=True,
    help="Skip the sort order check.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit non-zero on warnings and advice, not only errors.",
)
@pass_context
def lint(
    ctx: ReqLintContext,
    paths: Tuple[Path, ...],
    format: str,
    no_duplicates: bool,
    no_unsorted: bool,
    strict: bool,
) -> None:
    """Check requirements files for duplicate and unsorted packages.

    PATHS may be files or directories; directories are searched for
    ``requirements.txt``, ``requirements-*.txt`` and ``requirements/*.txt``.
    Defaults to ``requirements.txt`` in the current directory.

    Exits:
        0 if no failing findings were reported, 1 otherwise or on error.
    """
    try:
        failed = _run_lint(
            ctx,
            paths or (Path(DEFAULT_REQUIREMENTS_FILE),),
            format.lower(),
            no_duplicates=no_duplicates,
            no_unsorted=no_unsorted,
            strict=strict,
        )
        sys.exit(1 if failed else 0)

    except ReqLintError as e:
        print_error(f"{e}")
        sys.exit(1)


def build_linter(
    ctx: ReqLintContext,
    *,
    no_duplicates: bool = False,
    no_unsorted: bool = False,
) -> RequirementsLinter:
    """Create a linter from configuration, applying command-line overrides."""
    overrides: Dict[FindingKind, Severity] = dict(ctx.config.severity)
    if no_duplicates:
        overrides[FindingKind.DUPLICATE] = Severity.DISABLED
    if no_unsorted:
        overrides[FindingKind.UNSORTED] = Severity.DISABLED

    return RequirementsLinter(
        severity_overrides=overrides,
        bypass=ctx.config.bypass,
    )


def _run_lint(
    ctx: ReqLintContext,
    paths: Tuple[Path, ...],
    format: str,
    *,
    no_duplicates: bool,
    no_unsorted: bool,
    strict: bool,
) -> bool:
    """Lint every file and render the report.

    Returns:
        ``True`` if the run should fail: any error finding, or any finding
        at all under ``strict``.

    Raises:
        ReqLintError: A path cannot be expanded or read.
    """
    linter = build_linter(ctx, no_duplicates=no_duplicates, no_unsorted=no_unsorted)
    files = expand_paths(paths)

    if not files:
        if format != "json":
            print_warning("No requirements files found")
        else:
            _display_json([])
        return False

    findings: List[Finding] = []
    for file in files:
        findings.extend(linter.lint_path(file))

    logger.info("Linted %d file(s), %d finding(s)", len(files), len(findings))

    if format == "json":
        _display_json(findings)
    elif format == "simple":
        _display_simple(findings)
    else:
        _display_table(findings)

    failing = [f for f in findings if strict or (f.severity and f.severity.is_failure)]

    if format != "json":
        if not findings:
            print_success(f"{len(files)} file(s) checked, no problems found")
        else:
            print_warning(
                f"{len(findings)} problem(s) in {len(files)} file(s)"
                + (f", {len(failing)} failing" if failing else "")
            )

    return bool(failing)


# ---------------------------------------------------------------------------
# Display renderers
# ---------------------------------------------------------------------------


def _display_table(findings: List[Finding]) -> None:
    """Render findings as a Rich table, one row per finding."""
    data = [
        {
            "Location": f"{f.path}:{f.line}:{f.column}",
            "Severity": colorize_severity(f.severity.value if f.severity else "-"),
            "Check": f.kind.title,
            "Message": f.message,
        }
        for f in findings
    ]

    column_styles: Dict[str, Dict[str, Any]] = {
        "Location": {"style": "bold cyan", "no_wrap": True},
        "Severity": {"justify": "center", "no_wrap": True},
        "Check": {"no_wrap": True},
        "Message": {"justify": "left", "no_wrap": False},
    }

    print_table(data, title="Requirements Lint", column_styles=column_styles)


def _display_simple(findings: List[Finding]) -> None:
    """Render findings one per line in a compiler-style format.

    Example::

        requirements.txt:3:1: error: [duplicate] This line contains ...
    """
    console = get_raw_console()
    for f in findings:
        severity = f.severity.value if f.severity else "-"
        console.print(
            f"{f.path}:{f.line}:{f.column}: {severity}: [{f.kind.label}] {f.message}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


def _display_json(findings: List[Finding]) -> None:
    """Render findings as a JSON array for machine consumption."""
    print(json.dumps([f.to_json() for f in findings], indent=2))

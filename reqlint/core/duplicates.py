"""Duplicate package detection.

Walks the manifest in line order and reports every specifier whose package
name (compared case-insensitively) was already declared on an earlier
line. Version constraints play no part in the comparison, so ``flask==1.0``
and ``Flask>=2.0`` are duplicates of each other.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from reqlint.constants import DUPLICATE_MESSAGE_TEMPLATE
from reqlint.core.parser import parse_requirement
from reqlint.models.finding import Finding, FindingKind
from reqlint.models.requirement import LineRecord


def scan_duplicates(lines: Iterable[LineRecord]) -> List[Finding]:
    """Report repeated package declarations.

    One finding is emitted per repeated occurrence, and every finding cites
    the first declaration of the package, never an intermediate duplicate.
    A package listed three times therefore yields two findings, both
    pointing back at the first line.

    Args:
        lines: Trimmed, numbered manifest lines in file order.

    Returns:
        ``DUPLICATE`` findings in line order. Each carries the normalized
        package name as its bypass token.
    """
    # normalized name -> (first line number, first line text)
    first_seen: Dict[str, Tuple[int, str]] = {}
    findings: List[Finding] = []

    for record in lines:
        req = parse_requirement(record.text)
        if req is None:
            continue

        package = req.normalized_name
        if package not in first_seen:
            first_seen[package] = (record.number, record.text)
            continue

        first_line, first_text = first_seen[package]
        findings.append(
            Finding(
                line=record.number,
                kind=FindingKind.DUPLICATE,
                message=DUPLICATE_MESSAGE_TEMPLATE.format(
                    package=package,
                    line=first_line,
                    text=first_text,
                ),
                bypass=package,
            )
        )

    return findings

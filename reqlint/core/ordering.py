"""Sort-order detection using case-insensitive natural ordering.

Natural ordering compares runs of digits by numeric value instead of
character by character, so ``lib2`` sorts before ``lib10``. Other
characters compare one at a time by code point after ASCII upper-casing,
so ``Flask`` and ``flask`` are equal, ``_`` sorts after letters, and ``-``
and ``.`` sort before digits.

The scanner checks each requirement only against the one parsed
immediately before it. A manifest listed in reverse order therefore yields
one finding per adjacent inversion rather than a single file-level finding.
"""

from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Iterable, List, Optional

from reqlint.constants import UNSORTED_MESSAGE
from reqlint.core.parser import parse_requirement
from reqlint.models.finding import Finding, FindingKind
from reqlint.models.requirement import LineRecord

_DIGIT_RUN = re.compile(r"[0-9]+")
_LEADING_ZEROS = re.compile(r"0+(?=[0-9])")


def _fold(char: str) -> str:
    return char.upper() if "a" <= char <= "z" else char


def _compare_digit_runs(left: str, right: str) -> int:
    """Compare two runs of ASCII digits.

    Runs starting with ``0`` are treated as fractional and compared
    left-aligned, digit by digit. Otherwise the longer run is larger and
    equal-length runs compare digit by digit.
    """
    fractional = left.startswith("0") or right.startswith("0")
    if not fractional and len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    return (left > right) - (left < right)


def natural_compare(left: str, right: str) -> int:
    """Compare two strings in case-insensitive natural order.

    Leading zeros at the very start of either string are ignored. Where
    both strings have a digit run at the current position the runs are
    compared as numbers; anywhere else single characters are compared
    after upper-casing. A string that runs out first sorts first.

    Returns:
        ``-1`` if ``left`` sorts first, ``0`` if the two are equivalent,
        ``1`` if ``right`` sorts first.
    """
    i = _skip_leading_zeros(left)
    j = _skip_leading_zeros(right)

    while i < len(left) and j < len(right):
        left_run = _DIGIT_RUN.match(left, i)
        right_run = _DIGIT_RUN.match(right, j)
        if left_run and right_run:
            result = _compare_digit_runs(left_run.group(), right_run.group())
            if result:
                return result
            i, j = left_run.end(), right_run.end()
            continue

        left_char, right_char = _fold(left[i]), _fold(right[j])
        if left_char != right_char:
            return -1 if left_char < right_char else 1
        i += 1
        j += 1

    return (i < len(left)) - (j < len(right))


def _skip_leading_zeros(value: str) -> int:
    match = _LEADING_ZEROS.match(value)
    return match.end() if match else 0


#: Sort key for :func:`natural_compare`, e.g. ``sorted(names, key=natural_key)``.
natural_key = cmp_to_key(natural_compare)


def scan_sorted(lines: Iterable[LineRecord]) -> List[Finding]:
    """Report specifiers that do not sort strictly after their predecessor.

    Blank, comment and other non-requirement lines are skipped without
    resetting the comparison, so they never break a sorted run.

    The first requirement of every manifest is reported as unsorted: there
    is no previous name yet, and the empty predecessor is treated as not
    sorting before anything. Existing lint baselines depend on that
    finding, so it is kept.

    Args:
        lines: Trimmed, numbered manifest lines in file order.

    Returns:
        ``UNSORTED`` findings in line order.
    """
    last: Optional[str] = None
    findings: List[Finding] = []

    for record in lines:
        req = parse_requirement(record.text)
        if req is None:
            continue

        if last is None or natural_compare(req.name, last) <= 0:
            findings.append(
                Finding(
                    line=record.number,
                    kind=FindingKind.UNSORTED,
                    message=UNSORTED_MESSAGE,
                )
            )

        last = req.name

    return findings

"""Specifier parser for requirements manifests.

Extracts a package name and an optional ``<comparator><version>`` pair from
the start of a PEP 508 style specifier line::

    requests            -> Requirement("requests")
    Django>=4.2         -> Requirement("Django", Comparator.GREATER_EQUAL, "4.2")
    numpy == 1.26.*     -> Requirement("numpy", Comparator.EQUAL, "1.26.*")
    pytz; python_version < "3.9"   -> Requirement("pytz")

Parsing is best-effort extraction rather than validation: the pattern is
anchored at the start of the line only, so markers, extras and inline
comments after the matched prefix are ignored. Lines that do not start
with an alphanumeric character (blank lines, ``# comments``, ``-r``
directives) are not requirements and yield ``None``.

Typical usage::

    from reqlint.core.parser import parse_requirement, split_lines

    for record in split_lines(content):
        req = parse_requirement(record.text)
        if req is not None:
            print(record.number, req.name)
"""

from __future__ import annotations

import re
from typing import List, Optional

from reqlint.models.requirement import Comparator, LineRecord, Requirement

# Longer operators precede their prefixes so "===" is never read as "==".
_COMPARATORS = sorted((c.value for c in Comparator), key=len, reverse=True)

REQUIREMENT_PATTERN = re.compile(
    r"(?P<name>[A-Za-z0-9][A-Za-z0-9\-_.]*)"
    r"(?:\s*(?P<cmp>" + "|".join(re.escape(op) for op in _COMPARATORS) + r")\s*"
    r"(?P<version>[A-Za-z0-9\-_.*+!]+))?"
)

_LINE_BREAK = re.compile(r"\r\n|\n|\r")

# ASCII whitespace and NUL only; other Unicode spaces are kept.
_TRIM_CHARS = " \t\n\r\0\x0b"


def parse_requirement(line: str) -> Optional[Requirement]:
    """Parse one trimmed manifest line.

    Args:
        line: Line text with surrounding whitespace already removed. The
            empty string is valid input.

    Returns:
        The extracted :class:`Requirement`, or ``None`` when the line does
        not begin with a package name.
    """
    match = REQUIREMENT_PATTERN.match(line)
    if match is None:
        return None

    cmp = match.group("cmp")
    return Requirement(
        name=match.group("name"),
        comparator=Comparator(cmp) if cmp else None,
        version=match.group("version") if cmp else None,
    )


def split_lines(content: str) -> List[LineRecord]:
    """Split manifest content into numbered, trimmed line records.

    Lines are separated by ``\\r\\n``, ``\\n`` or ``\\r``; terminators are
    dropped and a trailing terminator does not produce an extra record.
    Numbering starts at 1.
    """
    if not content:
        return []

    pieces = _LINE_BREAK.split(content)
    if pieces and pieces[-1] == "":
        pieces.pop()

    return [
        LineRecord(number=index, text=piece.strip(_TRIM_CHARS))
        for index, piece in enumerate(pieces, start=1)
    ]

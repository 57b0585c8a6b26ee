"""
Filesystem utilities for reqlint.

reqlint never modifies the files it lints. This module supplies the
read side only: size-limited text reads and discovery of requirement
files under a directory. All filesystem errors are normalized to
``FileOperationError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from reqlint.utils.logger import get_logger
from reqlint.exceptions import FileOperationError
from reqlint.constants import MAX_FILE_SIZE, REQUIREMENT_FILE_PATTERNS


logger = get_logger("filesystem")

PathLike = Union[str, Path]


def _validated_file(path: Path) -> Path:
    """Ensure ``path`` exists and is a regular file, then resolve it."""
    if not path.exists():
        raise FileOperationError(
            f"File not found: {path}",
            file_path=str(path),
            operation="read",
        )
    if not path.is_file():
        raise FileOperationError(
            f"Not a file: {path}",
            file_path=str(path),
            operation="read",
        )
    return path.resolve()


def safe_read_file(
    file_path: PathLike,
    *,
    max_size: Optional[int] = MAX_FILE_SIZE,
    encoding: str = "utf-8",
) -> str:
    """Read a text file, refusing files larger than ``max_size`` bytes.

    Args:
        file_path: Path to the file.
        max_size: Maximum allowed file size in bytes (None disables limit).
        encoding: Text encoding.

    Returns:
        File contents as a string.

    Raises:
        FileOperationError: Missing file, directory, oversized file, or a
            read/decode failure.
    """
    path = _validated_file(Path(file_path))
    size = path.stat().st_size

    if max_size is not None and size > max_size:
        raise FileOperationError(
            f"File too large: {size} bytes (max {max_size})",
            file_path=str(path),
            operation="read",
        )

    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise FileOperationError(
            f"Failed to read file: {exc}",
            file_path=str(path),
            operation="read",
            original_error=exc,
        ) from exc


def find_requirements_files(
    directory: PathLike = ".",
    *,
    recursive: bool = True,
) -> List[Path]:
    """Find requirement files within a directory, sorted by path."""
    root = Path(directory).resolve()
    if not root.is_dir():
        return []

    matches: List[Path] = []
    for pattern in REQUIREMENT_FILE_PATTERNS:
        iterator = root.rglob(pattern) if recursive else root.glob(pattern)
        matches.extend(p for p in iterator if p.is_file())

    return sorted(set(matches))


def expand_paths(paths: Iterable[PathLike]) -> List[Path]:
    """Expand directory arguments into the requirement files they contain.

    Files are kept as given, in order; each directory is replaced by the
    result of :func:`find_requirements_files`. Duplicates are dropped.

    Raises:
        FileOperationError: A path does not exist.
    """
    expanded: List[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found = find_requirements_files(path)
            logger.debug("Found %d requirement file(s) in %s", len(found), path)
            expanded.extend(found)
        elif path.exists():
            expanded.append(path)
        else:
            raise FileOperationError(
                f"Path not found: {path}",
                file_path=str(path),
                operation="discover",
            )

    unique: List[Path] = []
    seen = set()
    for path in expanded:
        key = path.resolve()
        if key not in seen:
            seen.add(key)
            unique.append(path)
    return unique

"""
DOT file reading component.

Locates DOT files on disk and returns their contents, one string per file, in
a deterministic order. Parsing is left entirely to the parsing workflow.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cdepgraph.helpers.exceptions import DotReadError

logger = logging.getLogger(__name__)

DOT_EXTENSION = ".dot"


def is_dot_file(path: str | Path) -> bool:
    """True if the path has a ``.dot`` extension (case-insensitive)."""
    return Path(path).suffix.lower() == DOT_EXTENSION


def collect_dot_files(directory: str | Path, recursive: bool = False) -> list[Path]:
    """
    Collect DOT files inside a directory.

    Args:
        directory: Directory to scan
        recursive: If True, descend into subdirectories

    Returns:
        Sorted list of DOT file paths (sorted so runs are reproducible)
    """
    root = Path(directory)
    candidates = root.rglob("*") if recursive else root.glob("*")
    return sorted(p for p in candidates if p.is_file() and is_dot_file(p))


def read_dot_file(path: str | Path) -> str:
    """Read one file as UTF-8; undecodable bytes are replaced, not fatal."""
    file_path = Path(path)
    logger.debug("Reading %s ...", file_path)
    try:
        return file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DotReadError(f"Cannot read {file_path}: {e}") from e


def read_single_file(path: str | Path) -> list[str]:
    """
    Read a single DOT file.

    Returns:
        List holding the contents of the file

    Raises:
        DotReadError: If the path is not a DOT file or does not exist
    """
    file_path = Path(path)
    if not is_dot_file(file_path):
        raise DotReadError(f"Invalid file extension for {file_path}: must be '{DOT_EXTENSION}'")
    if not file_path.is_file():
        raise DotReadError(f"File not found: {file_path}")
    return [read_dot_file(file_path)]


def read_directory(directory: str | Path, recursive: bool = False) -> list[str]:
    """
    Read every DOT file in a directory.

    Raises:
        DotReadError: If the directory does not exist or holds no DOT files
    """
    dir_path = Path(directory)
    if not dir_path.is_dir():
        raise DotReadError(f"Directory not found: {dir_path}")

    dot_files = collect_dot_files(dir_path, recursive=recursive)
    if not dot_files:
        raise DotReadError(f"Directory did not contain any DOT files: {dir_path}")

    logger.info("Found %d DOT file(s) in %s", len(dot_files), dir_path)
    return [read_dot_file(p) for p in dot_files]

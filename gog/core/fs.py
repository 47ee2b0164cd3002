"""Filesystem predicates used by the repository code."""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def is_directory(path: PathLike) -> bool:
    """Return True if path exists and is a directory."""
    return Path(path).is_dir()


def is_regular_file(path: PathLike) -> bool:
    """Return True if path exists and is a regular file."""
    return Path(path).is_file()


def is_empty_directory(path: PathLike) -> bool:
    """Return True if path is a directory with no entries."""
    if not is_directory(path):
        return False
    return next(Path(path).iterdir(), None) is None

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path
from typing import Union


def to_os_path(reference: str) -> str:
    """
    Convert a forward-slash document reference into a path using the OS separator.
    """
    return reference.replace("/", os.sep)


def has_suffix(reference: Union[str, PathLike[str]], suffix: str) -> bool:
    return str(reference).lower().endswith(suffix.lower())


def ensure_suffix(reference: str, suffix: str) -> str:
    """
    Append `suffix` to `reference` unless it already ends with it (case-insensitive).
    """
    if has_suffix(reference, suffix):
        return reference
    return reference + suffix


def canonical_path(path: Union[str, PathLike[str]]) -> Path:
    """
    Absolute, symlink-free form of a document path used to recognize repeated visits.
    """
    return Path(path).resolve()

"""Filesystem helper utilities shared across common modules."""

from __future__ import annotations

import os
from pathlib import Path


def ensure_dir(path: Path | str) -> Path:
    p = Path(path).expanduser()
    p.mkdir(parents=True, exist_ok=True)
    return p


def has_extension(path: Path, extension: str) -> bool:
    """Case-insensitive match of the final suffix of ``path`` against ``extension``."""
    suffix = path.suffix
    if not suffix:
        return False
    return suffix[1:].lower() == extension.lower()


def swap_extension(path: Path, extension: str) -> Path:
    return path.with_suffix(f".{extension}")


def display_relative(root: Path, path: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def path_exists(path: Path | str) -> bool:
    """
    Check if anything exists at ``path``.
    Dangling symlinks count as existing.
    """
    return os.path.lexists(path)

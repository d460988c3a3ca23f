"""
r3dy.collector

Walks a directory tree and gathers the files whose extension matches the
source extension.

The walk uses an explicit stack rather than recursion and inspects every
entry without following symlinks first. Symlinks to matching regular files
are collected as links; symlinks to directories are never descended into.
Unreadable entries become warnings and the walk carries on.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from common.base.fs import has_extension
from common.base.logging import get_logger

log = get_logger(__name__)


@dataclass
class CollectedFiles:
    files: List[Path] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _list_children(path: Path, stack: List[Path], warnings: List[str]) -> None:
    try:
        entries = os.scandir(path)
    except OSError as exc:
        warnings.append(f"Skipping directory {path}: {exc}")
        return

    with entries:
        iterator = iter(entries)
        while True:
            try:
                entry = next(iterator)
            except StopIteration:
                break
            except OSError as exc:
                warnings.append(f"Skipping entry in {path}: {exc}")
                break
            stack.append(path / entry.name)


def collect_files(root: Path, extension: str) -> CollectedFiles:
    """
    Collect files under ``root`` whose extension equals ``extension``
    (case-insensitive), sorted by path.
    """
    stack: List[Path] = [root]
    collected = CollectedFiles()

    while stack:
        path = stack.pop()
        try:
            metadata = os.lstat(path)
        except OSError as exc:
            collected.warnings.append(f"Skipping {path}: {exc}")
            continue

        mode = metadata.st_mode
        if stat.S_ISDIR(mode):
            _list_children(path, stack, collected.warnings)
        elif stat.S_ISREG(mode):
            if has_extension(path, extension):
                collected.files.append(path)
        elif stat.S_ISLNK(mode):
            try:
                target_metadata = os.stat(path)
            except OSError as exc:
                collected.warnings.append(f"Skipping symlink {path}: {exc}")
                continue
            if stat.S_ISREG(target_metadata.st_mode) and has_extension(path, extension):
                collected.files.append(path)

    collected.files.sort()
    log.debug(
        f"Collected {len(collected.files)} .{extension} file(s) under {root} "
        f"({len(collected.warnings)} warning(s))"
    )
    return collected

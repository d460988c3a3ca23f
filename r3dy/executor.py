"""
r3dy.executor

Renames each collected file to the target extension.

Every candidate ends in exactly one outcome:
 - converted: renamed in place (same directory, same stem)
 - skipped: a file with the target name already exists, nothing is touched
 - failed: the rename call raised, the error is recorded and the run goes on
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from common.base.fs import display_relative, path_exists, swap_extension
from common.base.ops import rename_path
from common.shared.utils import NullProgress, ProgressObserver

from .config import RunConfig

STATUS_CONVERTED = "converted"
STATUS_SKIPPED = "skipped"
STATUS_FAILED = "failed"

REPORT_FIELDS = ["path", "target", "status", "message"]


@dataclass(frozen=True)
class RenameFailure:
    path: Path
    target: Path
    error: str


@dataclass(frozen=True)
class RenameOutcome:
    path: Path
    target: Path
    status: str
    message: str = ""


@dataclass
class RunSummary:
    converted: int = 0
    skipped_existing: int = 0
    failed: List[RenameFailure] = field(default_factory=list)
    outcomes: List[RenameOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.converted + self.skipped_existing + len(self.failed)

    def summary_line(self) -> str:
        plural = "" if self.converted == 1 else "s"
        return (
            f"Converted {self.converted} file{plural} "
            f"(skipped: {self.skipped_existing}, failed: {len(self.failed)})"
        )

    def failure_lines(self, root: Path) -> List[str]:
        return [
            f"Could not rename {display_relative(root, failure.path)}: {failure.error}"
            for failure in self.failed
        ]

    def as_rows(self, root: Path) -> List[Dict[str, str]]:
        return [
            {
                "path": display_relative(root, outcome.path),
                "target": display_relative(root, outcome.target),
                "status": outcome.status,
                "message": outcome.message,
            }
            for outcome in self.outcomes
        ]


def execute(
    files: Sequence[Path],
    config: RunConfig,
    observer: Optional[ProgressObserver] = None,
) -> RunSummary:
    """
    Rename ``files`` in order from the source to the target extension.

    The target is checked for existence before each rename, so existing
    files are never overwritten. Failures are recorded and never retried.
    """
    progress = observer or NullProgress()
    summary = RunSummary()
    total = len(files)
    root = config.root

    progress.start(total)

    for position, path in enumerate(files, start=1):
        display_path = display_relative(root, path)
        target = swap_extension(path, config.target_extension)

        if path_exists(target):
            summary.skipped_existing += 1
            message = f"{display_relative(root, target)} already exists"
            summary.outcomes.append(RenameOutcome(path, target, STATUS_SKIPPED, message))
            progress.note(f"Skipping {display_path} ({message})")
            progress.advance(display_path, position, total)
            continue

        try:
            rename_path(path, target, dry_run=config.dry_run)
        except OSError as exc:
            error_text = str(exc)
            summary.failed.append(RenameFailure(path, target, error_text))
            summary.outcomes.append(RenameOutcome(path, target, STATUS_FAILED, error_text))
            progress.note(f"Failed to rename {display_path}: {error_text}")
        else:
            summary.converted += 1
            summary.outcomes.append(RenameOutcome(path, target, STATUS_CONVERTED))
            if config.dry_run:
                progress.note(
                    f"[DRY-RUN] Would rename {display_path} → {display_relative(root, target)}",
                    logging.INFO,
                )

        progress.advance(display_path, position, total)

    progress.finish("renaming complete")
    return summary


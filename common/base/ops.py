"""
common.base.ops

Filesystem operations with dry-run support.
"""

from __future__ import annotations

import os
from pathlib import Path

from .logging import get_logger

log = get_logger(__name__)


def rename_path(src: Path | str, dst: Path | str, dry_run: bool = False) -> None:
    """
    Rename ``src`` to ``dst`` with a single rename call.

    No copy fallback is attempted, so a rename across filesystems fails.
    Raises OSError on failure.
    """
    src_path = Path(src)
    dst_path = Path(dst)

    if dry_run:
        log.debug(f"[DRY-RUN] Would rename {src_path} → {dst_path}")
        return

    os.rename(src_path, dst_path)
    log.debug(f"✅ Renamed {src_path} → {dst_path}")

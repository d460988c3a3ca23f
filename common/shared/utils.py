"""
common.shared.utils

Progress reporting helpers shared across r3dy modules.

Progress observers receive (label, position, total) updates from the
rename loop and render them. They never influence the work being done.
Without a bar, notes are logged at the level the caller gives.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Protocol

from tqdm import tqdm

from common.base.logging import get_logger

log = get_logger(__name__)


# ----------------------------------------------------------------------
# OBSERVER INTERFACE
# ----------------------------------------------------------------------

class ProgressObserver(Protocol):
    def start(self, total: int) -> None: ...

    def advance(self, label: str, position: int, total: int) -> None: ...

    def note(self, message: str, level: int = logging.WARNING) -> None: ...

    def finish(self, message: str) -> None: ...


class NullProgress:
    """Observer without a bar; notes go to the log instead."""

    def start(self, total: int) -> None:
        pass

    def advance(self, label: str, position: int, total: int) -> None:
        pass

    def note(self, message: str, level: int = logging.WARNING) -> None:
        log.log(level, message)

    def finish(self, message: str) -> None:
        pass


# ----------------------------------------------------------------------
# TQDM PROGRESS BAR
# ----------------------------------------------------------------------

class Progress:
    """
    tqdm-backed progress bar showing element count, elapsed time and the
    current file name. Notes are printed above the bar on their own line.
    """

    BAR_FORMAT = "{desc} [{elapsed}] {bar} {n_fmt}/{total_fmt} {postfix}"

    def __init__(self, desc: str = "Renaming", leave: bool = True):
        self.desc = desc
        self.leave = leave
        self._tqdm: Optional[tqdm] = None

    def _open(self, total: int) -> tqdm:
        self._tqdm = tqdm(
            total=total,
            desc=self.desc,
            bar_format=self.BAR_FORMAT,
            leave=self.leave,
            dynamic_ncols=True,
        )
        return self._tqdm

    def start(self, total: int) -> None:
        self._open(total)

    def advance(self, label: str, position: int, total: int) -> None:
        bar = self._tqdm if self._tqdm is not None else self._open(total)
        bar.set_postfix_str(label, refresh=False)
        bar.update(position - bar.n)

    def note(self, message: str, level: int = logging.WARNING) -> None:
        """Print a message above the progress bar on its own line."""
        tqdm.write(message, file=sys.stderr)

    def finish(self, message: str) -> None:
        if self._tqdm is None:
            return
        self._tqdm.set_postfix_str(message, refresh=True)
        self._tqdm.close()
        self._tqdm = None

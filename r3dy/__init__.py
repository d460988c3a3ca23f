"""
r3dy: rename .NEV files to .R3D (and back) across a directory tree.

Modules:
  config     : argument parsing and the immutable run configuration
  collector  : tree walk producing the sorted candidate list
  executor   : per-file rename with converted/skipped/failed accounting
  cli        : command-line entry point
"""

from .collector import CollectedFiles, collect_files
from .config import EXT_A, EXT_B, ConfigError, RunConfig
from .executor import RenameFailure, RenameOutcome, RunSummary, execute

__all__ = [
    "EXT_A",
    "EXT_B",
    "CollectedFiles",
    "ConfigError",
    "RenameFailure",
    "RenameOutcome",
    "RunConfig",
    "RunSummary",
    "collect_files",
    "execute",
]

"""
r3dy.config

Command-line parsing and the immutable run configuration.

The configuration is built once at startup and handed to the collector and
executor; nothing downstream reads process-wide argument state.
"""

from __future__ import annotations

import argparse
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, NoReturn, Optional

EXT_A = "NEV"
EXT_B = "R3D"

PROG = "r3dy"
DESCRIPTION = (
    f"Renames .{EXT_A} files to .{EXT_B} (or vice versa with --invert) within the given path."
)


class ConfigError(ValueError):
    """Invalid arguments or an unusable root directory."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ConfigError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog=PROG, description=DESCRIPTION)
    parser.add_argument(
        "path",
        nargs="?",
        help="Root directory to process (defaults to the current directory).",
    )
    parser.add_argument(
        "--invert",
        action="store_true",
        default=None,
        help=f"Rename .{EXT_B} files to .{EXT_A} instead.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Report what would be renamed without touching any file.",
    )
    parser.add_argument(
        "--no-progress",
        dest="progress",
        action="store_false",
        default=None,
        help="Disable the progress bar.",
    )
    parser.add_argument(
        "--report-dir",
        type=Path,
        help="Write CSV/JSON reports of every processed file to this directory.",
    )
    parser.add_argument(
        "--config",
        "-c",
        help="Path to a YAML configuration file.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging verbosity (default: INFO).",
    )
    return parser


def usage() -> str:
    return build_parser().format_help().rstrip()


def _pick(cli_value: Any, settings: Mapping[str, Any], key: str, default: Any) -> Any:
    if cli_value is not None:
        return cli_value
    value = settings.get(key)
    return default if value is None else value


def resolve_root(path: Optional[str], cwd: Optional[Path] = None) -> Path:
    """
    Resolve the root argument into a canonical directory path.

    Relative paths are joined to ``cwd`` (the process working directory by
    default). Raises ConfigError when the path is inaccessible, not a
    directory, or cannot be canonicalized.
    """
    if cwd is None:
        try:
            cwd = Path(os.getcwd())
        except OSError as exc:
            raise ConfigError(f"Failed to determine current directory: {exc}") from exc

    if path is None:
        root = cwd
    else:
        candidate = Path(path)
        root = candidate if candidate.is_absolute() else cwd / candidate

    try:
        metadata = root.stat()
    except OSError as exc:
        raise ConfigError(f"{root} is not accessible: {exc}") from exc

    if not stat.S_ISDIR(metadata.st_mode):
        raise ConfigError(f"{root} is not a directory")

    try:
        return root.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ConfigError(f"Failed to resolve {root}: {exc}") from exc


@dataclass(frozen=True)
class RunConfig:
    root: Path
    invert: bool = False
    dry_run: bool = False
    progress: bool = True
    report_dir: Optional[Path] = None

    @property
    def source_extension(self) -> str:
        return EXT_B if self.invert else EXT_A

    @property
    def target_extension(self) -> str:
        return EXT_A if self.invert else EXT_B

    @classmethod
    def from_args(
        cls,
        args: argparse.Namespace,
        settings: Optional[Mapping[str, Any]] = None,
        cwd: Optional[Path] = None,
    ) -> "RunConfig":
        """Build the run configuration; CLI flags win over file settings."""
        settings = settings or {}
        report_dir = args.report_dir or settings.get("report_dir")
        return cls(
            root=resolve_root(args.path, cwd),
            invert=bool(_pick(args.invert, settings, "invert", False)),
            dry_run=bool(_pick(args.dry_run, settings, "dry_run", False)),
            progress=bool(_pick(args.progress, settings, "progress", True)),
            report_dir=Path(report_dir).expanduser() if report_dir else None,
        )

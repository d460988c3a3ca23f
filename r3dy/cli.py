"""
r3dy.cli

Command-line entry point: parse arguments, collect candidates, rename them
and print the summary.

Exit codes:
  0  success (including "no files found", --help and runs with failed renames)
  1  configuration error or unexpected failure
  130  interrupted
"""

from __future__ import annotations

import sys
from typing import Iterable, Optional

import yaml

from common.base.logging import get_logger, setup_logging
from common.shared.loader import load_rename_config
from common.shared.report import export_report, summarize_counts
from common.shared.utils import NullProgress, Progress, ProgressObserver

from .collector import collect_files
from .config import ConfigError, RunConfig, build_parser, usage
from .executor import REPORT_FIELDS, execute

log = get_logger(__name__)

REPORT_BASE_NAME = "r3dy_rename"


def run(config: RunConfig, observer: Optional[ProgressObserver] = None) -> int:
    """Collect and rename files for one configured run."""
    source = config.source_extension
    collected = collect_files(config.root, source)

    for warning in collected.warnings:
        log.warning(warning)

    if not collected.files:
        print(f"No .{source} files found under {config.root}")
        return 0

    if observer is None:
        observer = Progress() if config.progress else NullProgress()

    log.info(
        f"{'[DRY-RUN] ' if config.dry_run else ''}Renaming {len(collected.files)} "
        f".{source} file(s) to .{config.target_extension} under {config.root}"
    )
    summary = execute(collected.files, config, observer)

    print(summary.summary_line())
    for line in summary.failure_lines(config.root):
        log.error(line)

    log.debug(
        summarize_counts(
            "Rename Summary",
            {
                "Converted": summary.converted,
                "Skipped": summary.skipped_existing,
                "Failed": len(summary.failed),
                "Total": summary.total,
            },
        )
    )

    if config.report_dir is not None:
        export_report(
            summary.as_rows(config.root),
            REPORT_BASE_NAME,
            output_dir=config.report_dir,
            fieldnames=REPORT_FIELDS,
            dry_run=config.dry_run,
        )

    return 0


def _config_error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    print(file=sys.stderr)
    print(usage(), file=sys.stderr)
    return 1


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(list(argv) if argv is not None else None)
        settings = load_rename_config(args.config)
        config = RunConfig.from_args(args, settings)
    except ConfigError as exc:
        return _config_error(str(exc))
    except (OSError, ValueError, yaml.YAMLError) as exc:
        return _config_error(f"Invalid configuration: {exc}")

    logging_cfg = settings.get("__logging__", {})
    setup_logging(
        level=args.log_level or logging_cfg.get("level"),
        use_rich=logging_cfg.get("use_rich"),
        log_dir=logging_cfg.get("log_dir"),
        file_prefix=logging_cfg.get("file_prefix"),
    )
    log.debug(f"Run configuration: {config}")

    try:
        return run(config)
    except KeyboardInterrupt:
        log.warning("⚠️ Operation cancelled by user.")
        return 130
    except Exception as e:
        log.error(f"❌ Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

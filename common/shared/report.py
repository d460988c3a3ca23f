"""
common.shared.report

Reporting utilities for r3dy runs.

 - Timestamped CSV/JSON exports of per-file outcomes
 - Dry-run simulation (skip writing files)
 - Human-readable count summaries
"""

from __future__ import annotations

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from common.base.fs import ensure_dir
from common.base.logging import get_logger

log = get_logger(__name__)


# ----------------------------------------------------------------------
# TIMESTAMPED FILENAMES
# ----------------------------------------------------------------------

def timestamped_filename(base_name: str, ext: str = "csv", output_dir: Optional[Path] = None) -> Path:
    """
    Generate a timestamped output filename (e.g., r3dy_rename_2025-10-06_103000.csv)
    """
    ts = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    name = f"{base_name}_{ts}.{ext}"
    output_dir = ensure_dir(output_dir or Path.cwd())
    return output_dir / name


# ----------------------------------------------------------------------
# JSON + CSV WRITERS
# ----------------------------------------------------------------------

def write_json(data: Any, output_path: Path, dry_run: bool = False) -> Path:
    """
    Write structured data to a JSON file.
    Respects dry-run (will only simulate write if enabled).
    """
    if dry_run:
        log.info(f"[DRY-RUN] Would write JSON: {output_path}")
        return output_path

    ensure_dir(output_path.parent)
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        log.error(f"Failed to write JSON report: {e}")
        raise
    log.info(f"📝 JSON report saved → {output_path}")
    return output_path


def write_csv(
    data: List[Dict[str, Any]],
    output_path: Path,
    fieldnames: Optional[Sequence[str]] = None,
    dry_run: bool = False,
) -> Path:
    """
    Write structured data to a CSV file.
    Respects dry-run (simulates write if enabled).
    """
    if not data:
        log.warning("No data provided for CSV export.")
        return output_path

    if dry_run:
        log.info(f"[DRY-RUN] Would write CSV: {output_path}")
        return output_path

    ensure_dir(output_path.parent)
    try:
        with open(output_path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.DictWriter(handle, fieldnames=list(fieldnames or data[0].keys()))
            writer.writeheader()
            writer.writerows(data)
    except OSError as e:
        log.error(f"Failed to write CSV report: {e}")
        raise
    log.info(f"📊 CSV report saved → {output_path}")
    return output_path


# ----------------------------------------------------------------------
# HUMAN-READABLE SUMMARY
# ----------------------------------------------------------------------

def summarize_counts(title: str, summary: Dict[str, int]) -> str:
    """
    Return a formatted, human-readable summary string.
    Example:
        summarize_counts("Rename Summary", {"Converted": 12, "Skipped": 3})
    """
    lines = [f"===== {title.upper()} ====="]
    for key, val in summary.items():
        lines.append(f"{key}: {val}")
    lines.append("=" * len(lines[0]))
    return "\n".join(lines)


# ----------------------------------------------------------------------
# UNIFIED EXPORT WRAPPER
# ----------------------------------------------------------------------

def export_report(
    data: List[Dict[str, Any]],
    base_name: str,
    output_dir: Optional[Path] = None,
    write_json_file: bool = True,
    write_csv_file: bool = True,
    fieldnames: Optional[Sequence[str]] = None,
    dry_run: bool = False,
) -> Dict[str, Path]:
    """
    Export report data to JSON and/or CSV files.

    Args:
        data: List of dicts (one per processed file)
        base_name: Base filename for reports (e.g. 'r3dy_rename')
        output_dir: Directory for report storage (defaults to cwd)
        write_json_file: Whether to generate JSON output
        write_csv_file: Whether to generate CSV output
        fieldnames: Explicit CSV column order
        dry_run: If True, no actual file I/O will occur

    Returns:
        Dict of written file paths (or simulated paths if dry-run)
    """
    written: Dict[str, Path] = {}

    if not data:
        log.warning("No report data to export.")
        return written

    if dry_run:
        log.info(f"[DRY-RUN] Would export '{base_name}' report to {output_dir or Path.cwd()}")
        return written

    output_dir = ensure_dir(output_dir or Path.cwd())

    if write_json_file:
        json_path = timestamped_filename(base_name, "json", output_dir)
        written["json"] = write_json(data, json_path)

    if write_csv_file:
        csv_path = timestamped_filename(base_name, "csv", output_dir)
        written["csv"] = write_csv(data, csv_path, fieldnames=fieldnames)

    log.debug(f"Report export completed for '{base_name}'")
    return written

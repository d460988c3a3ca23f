"""
Shared configuration loading and validation helpers.

Provides:
 - `load_config`: basic YAML loader
 - `load_rename_config`: validated settings for a rename run
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from common.base.logging import normalize_level


ConfigDict = Dict[str, Any]

LOGGING_SECTION_KEY = "logging"
RENAME_SECTION_KEY = "rename"

LOGGING_ALLOWED_KEYS = {"level", "use_rich", "log_dir", "file_prefix"}
RENAME_ALLOWED_KEYS = {"invert", "dry_run", "progress", "report_dir"}
TOP_LEVEL_KEYS = {LOGGING_SECTION_KEY, RENAME_SECTION_KEY}

BOOLEAN_FIELDS = {"invert", "dry_run", "progress", "use_rich"}
PATH_FIELDS = {"report_dir", "log_dir"}

YES_VALUES = {"1", "true", "yes", "y", "on"}
NO_VALUES = {"0", "false", "no", "n", "off"}


def load_config(path: str | Path | None) -> Mapping[str, Any]:
    if not path:
        return {}

    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {cfg_path}")

    with open(cfg_path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Configuration root must be a mapping in {cfg_path}")

    return data


def _coerce_bool(value: Any, key: str, config_path: Path) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in YES_VALUES:
        return True
    if text in NO_VALUES:
        return False
    raise ValueError(
        f"Configuration '{config_path}' field '{key}' must be a boolean (yes/no, true/false)."
    )


def _resolve_path(value: Any, key: str, config_path: Path) -> str:
    if value is None or str(value).strip() == "":
        raise ValueError(f"Configuration '{config_path}' field '{key}' cannot be empty.")
    candidate = Path(str(value)).expanduser()
    if not candidate.is_absolute():
        candidate = config_path.parent / candidate
    return str(candidate.resolve())


def _extract_section(
    root: Mapping[str, Any],
    name: str,
    allowed: set[str],
    config_path: Path,
) -> ConfigDict:
    section = root.get(name) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"'{name}' section must be a mapping in {config_path}")

    invalid = [key for key in section if key not in allowed]
    if invalid:
        invalid_keys = ", ".join(sorted(str(key) for key in invalid))
        raise ValueError(
            f"'{name}' section contains unsupported keys in {config_path}: {invalid_keys}"
        )

    normalized: ConfigDict = {}
    for key, value in section.items():
        if key in BOOLEAN_FIELDS:
            normalized[key] = _coerce_bool(value, key, config_path)
        elif key in PATH_FIELDS:
            normalized[key] = _resolve_path(value, key, config_path)
        elif key == "level":
            normalized[key] = normalize_level(value)
        else:
            normalized[key] = value
    return normalized


def load_rename_config(config_path: str | Path | None = None) -> ConfigDict:
    """
    Load and validate a rename configuration file.

    Returns the normalized `rename` settings with the logging section stored
    under ``__logging__`` and the source file under ``__config_path__``.
    An empty dict is returned when no path is given.
    """
    if not config_path:
        return {}

    resolved_path = Path(config_path).expanduser().resolve()
    root = load_config(resolved_path)

    unexpected = [key for key in root if key not in TOP_LEVEL_KEYS]
    if unexpected:
        raise ValueError(
            f"Configuration '{resolved_path}' contains unsupported sections: "
            f"{', '.join(sorted(str(key) for key in unexpected))}"
        )

    config = _extract_section(root, RENAME_SECTION_KEY, RENAME_ALLOWED_KEYS, resolved_path)
    logging_cfg = _extract_section(root, LOGGING_SECTION_KEY, LOGGING_ALLOWED_KEYS, resolved_path)
    if logging_cfg:
        config["__logging__"] = logging_cfg
    config["__config_path__"] = str(resolved_path)
    return config


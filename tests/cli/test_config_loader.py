from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from common.shared.loader import load_config, load_rename_config


def _write_config(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")
    return path


def _wrap_config(rename_body: str | None = None, logging_body: str | None = None) -> str:
    parts: list[str] = []
    if logging_body:
        parts.append("logging:\n")
        parts.append(textwrap.indent(logging_body.strip(), "  "))
        parts.append("\n")
    if rename_body:
        parts.append("rename:\n")
        parts.append(textwrap.indent(rename_body.strip(), "  "))
        parts.append("\n")
    return "".join(parts)


def test_load_rename_config_without_path_is_empty() -> None:
    assert load_rename_config(None) == {}


def test_load_rename_config_normalizes_values(tmp_path: Path) -> None:
    cfg_path = _write_config(
        tmp_path,
        "r3dy.yaml",
        _wrap_config(
            rename_body=(
                "invert: yes\n"
                "dry_run: 'off'\n"
                "progress: false\n"
                "report_dir: ./reports\n"
            ),
            logging_body="level: debug\nlog_dir: logs\nuse_rich: 'no'\n",
        ),
    )

    config = load_rename_config(cfg_path)

    assert config["invert"] is True
    assert config["dry_run"] is False
    assert config["progress"] is False
    assert config["report_dir"] == str((tmp_path / "reports").resolve())
    assert config["__config_path__"] == str(cfg_path.resolve())

    logging_cfg = config["__logging__"]
    assert logging_cfg["level"] == "DEBUG"
    assert logging_cfg["use_rich"] is False
    assert logging_cfg["log_dir"] == str((tmp_path / "logs").resolve())


def test_load_rename_config_unknown_level_falls_back_to_info(tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, "r3dy.yaml", _wrap_config(logging_body="level: chatty"))

    config = load_rename_config(cfg_path)

    assert config["__logging__"]["level"] == "INFO"


def test_load_rename_config_rejects_unknown_keys(tmp_path: Path) -> None:
    cfg_path = _write_config(
        tmp_path,
        "r3dy.yaml",
        _wrap_config(rename_body="invert: true\nroot: /somewhere\n"),
    )

    with pytest.raises(ValueError, match="root"):
        load_rename_config(cfg_path)


def test_load_rename_config_rejects_unknown_sections(tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, "r3dy.yaml", "tasks:\n  file_scan: {}\n")

    with pytest.raises(ValueError, match="tasks"):
        load_rename_config(cfg_path)


def test_load_rename_config_rejects_bad_boolean(tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, "r3dy.yaml", _wrap_config(rename_body="dry_run: maybe"))

    with pytest.raises(ValueError, match="dry_run"):
        load_rename_config(cfg_path)


def test_load_rename_config_section_requires_mapping(tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, "r3dy.yaml", "logging: not_a_mapping\n")

    with pytest.raises(ValueError):
        load_rename_config(cfg_path)


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_load_config_empty_file_is_empty_mapping(tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, "empty.yaml", "")

    assert load_config(cfg_path) == {}


def test_load_config_requires_mapping_root(tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, "list.yaml", "- a\n- b\n")

    with pytest.raises(ValueError):
        load_config(cfg_path)

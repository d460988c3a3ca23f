from __future__ import annotations

import os
from pathlib import Path

import pytest

import r3dy.collector as collector
from r3dy.collector import collect_files


def _touch(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_collect_files_matches_extension_case_insensitively(tmp_path: Path) -> None:
    upper = _touch(tmp_path / "a" / "x.NEV")
    lower = _touch(tmp_path / "a" / "y.nev")
    mixed = _touch(tmp_path / "b" / "deep" / "z.Nev")
    _touch(tmp_path / "b" / "other.R3D")
    _touch(tmp_path / "notes.txt")
    _touch(tmp_path / "archive.NEV.bak")

    collected = collect_files(tmp_path, "NEV")

    assert collected.files == [upper, lower, mixed]
    assert collected.warnings == []


def test_collect_files_ignores_dotfile_without_extension(tmp_path: Path) -> None:
    _touch(tmp_path / ".NEV")

    collected = collect_files(tmp_path, "NEV")

    assert collected.files == []


def test_collect_files_is_sorted_and_repeatable(tmp_path: Path) -> None:
    names = ["c/3.NEV", "a/1.NEV", "b/2.NEV", "a/0.NEV", "top.NEV"]
    for name in names:
        _touch(tmp_path / name)

    first = collect_files(tmp_path, "NEV")
    second = collect_files(tmp_path, "NEV")

    assert first.files == sorted(tmp_path / name for name in names)
    assert first.files == second.files


def test_collect_files_returns_empty_for_tree_without_matches(tmp_path: Path) -> None:
    _touch(tmp_path / "clip.R3D")
    (tmp_path / "empty").mkdir()

    collected = collect_files(tmp_path, "NEV")

    assert collected.files == []
    assert collected.warnings == []


def test_collect_files_includes_symlink_to_matching_file(tmp_path: Path) -> None:
    real = _touch(tmp_path / "store" / "take.NEV")
    link = tmp_path / "links" / "alias.NEV"
    link.parent.mkdir()
    link.symlink_to(real)

    collected = collect_files(tmp_path, "NEV")

    assert collected.files == [link, real]


def test_collect_files_uses_link_name_for_extension(tmp_path: Path) -> None:
    real = _touch(tmp_path / "take.bin")
    link = tmp_path / "alias.NEV"
    link.symlink_to(real)
    other = tmp_path / "alias.txt"
    other.symlink_to(_touch(tmp_path / "clip.NEV"))

    collected = collect_files(tmp_path, "NEV")

    assert collected.files == [link, tmp_path / "clip.NEV"]


def test_collect_files_does_not_descend_into_directory_symlinks(tmp_path: Path) -> None:
    inside = _touch(tmp_path / "real" / "x.NEV")
    (tmp_path / "loop").symlink_to(tmp_path, target_is_directory=True)
    (tmp_path / "mirror.NEV").symlink_to(tmp_path / "real", target_is_directory=True)

    collected = collect_files(tmp_path, "NEV")

    assert collected.files == [inside]
    assert collected.warnings == []


def test_collect_files_warns_on_dangling_symlink(tmp_path: Path) -> None:
    keep = _touch(tmp_path / "keep.NEV")
    dangling = tmp_path / "gone.NEV"
    dangling.symlink_to(tmp_path / "missing.NEV")

    collected = collect_files(tmp_path, "NEV")

    assert collected.files == [keep]
    assert len(collected.warnings) == 1
    assert collected.warnings[0].startswith(f"Skipping symlink {dangling}:")


def test_collect_files_warns_when_root_entry_vanished(tmp_path: Path) -> None:
    missing = tmp_path / "missing"

    collected = collect_files(missing, "NEV")

    assert collected.files == []
    assert len(collected.warnings) == 1
    assert collected.warnings[0].startswith(f"Skipping {missing}:")


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission checks are bypassed for root",
)
def test_collect_files_continues_past_unreadable_directory(tmp_path: Path) -> None:
    locked = tmp_path / "locked"
    _touch(locked / "hidden.NEV")
    sibling = _touch(tmp_path / "open" / "visible.NEV")
    locked.chmod(0)
    try:
        collected = collect_files(tmp_path, "NEV")
    finally:
        locked.chmod(0o755)

    assert collected.files == [sibling]
    assert len(collected.warnings) == 1
    assert collected.warnings[0].startswith(f"Skipping directory {locked}:")


def test_collect_files_skips_directory_that_cannot_be_listed(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    locked = tmp_path / "locked"
    _touch(locked / "hidden.NEV")
    sibling = _touch(tmp_path / "open" / "visible.NEV")
    real_scandir = os.scandir

    def guarded_scandir(path):
        if Path(path) == locked:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(collector.os, "scandir", guarded_scandir)

    collected = collect_files(tmp_path, "NEV")

    assert collected.files == [sibling]
    assert len(collected.warnings) == 1
    assert collected.warnings[0].startswith(f"Skipping directory {locked}:")
    assert "Permission denied" in collected.warnings[0]


class _BrokenListing:
    """Directory listing that yields one entry and then fails."""

    def __init__(self, entries):
        self._entries = list(entries)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def __iter__(self):
        return self

    def __next__(self):
        if self._entries:
            return self._entries.pop(0)
        raise OSError(5, "Input/output error")


def test_collect_files_keeps_entries_read_before_listing_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    flaky = tmp_path / "flaky"
    first = _touch(flaky / "a.NEV")
    _touch(flaky / "b.NEV")
    other = _touch(tmp_path / "other" / "c.NEV")
    real_scandir = os.scandir

    def flaky_scandir(path):
        if Path(path) == flaky:
            with real_scandir(path) as entries:
                kept = [entry for entry in entries if entry.name == "a.NEV"]
            return _BrokenListing(kept)
        return real_scandir(path)

    monkeypatch.setattr(collector.os, "scandir", flaky_scandir)

    collected = collect_files(tmp_path, "NEV")

    assert collected.files == [first, other]
    assert len(collected.warnings) == 1
    assert collected.warnings[0].startswith(f"Skipping entry in {flaky}:")
    assert "Input/output error" in collected.warnings[0]

from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, directory listing order and the raw
read/stat/write primitives against a real temporary directory.
"""

import os
from pathlib import Path

import pytest

from treedocs.infra.fs import (
    byte_size,
    is_directory,
    list_entries,
    normalize_path,
    read_bytes,
    to_posix,
    write_text,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_normalize_path_uses_fallback_for_empty(tmp_path: Path) -> None:
    assert normalize_path("  ", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)


def test_normalize_path_expands_user(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert normalize_path("~/docs", "/") == os.path.join(str(tmp_path), "docs")


def test_to_posix() -> None:
    assert to_posix("a\\b\\c.md") == "a/b/c.md"

# -----------------------------------------------------------------------------
# READ / WRITE TESTS
# -----------------------------------------------------------------------------

def test_list_entries_sorted_with_kinds(tmp_path: Path) -> None:
    (tmp_path / "b.md").write_text("b", encoding="utf-8")
    (tmp_path / "a").mkdir()
    (tmp_path / "C.md").write_text("c", encoding="utf-8")

    entries = list_entries(str(tmp_path))

    assert [e.name for e in entries] == ["C.md", "a", "b.md"]
    assert [e.is_directory for e in entries] == [False, True, False]
    assert entries[1].path == os.path.join(str(tmp_path), "a")


def test_list_entries_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        list_entries(str(tmp_path / "missing"))


def test_write_read_and_stat(tmp_path: Path) -> None:
    target = tmp_path / "page.md"

    write_text(str(target), "道\n可道\n", "utf-8")

    assert read_bytes(str(target)) == "道\n可道\n".encode("utf-8")
    assert byte_size(str(target)) == len("道\n可道\n".encode("utf-8"))
    assert is_directory(str(tmp_path))
    assert not is_directory(str(target))


def test_write_overwrites_existing(tmp_path: Path) -> None:
    target = tmp_path / "README.md"
    target.write_text("old content that is longer", encoding="utf-8")

    write_text(str(target), "new", "utf-8")

    assert target.read_text(encoding="utf-8") == "new"


def test_write_into_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        write_text(str(tmp_path / "nope" / "README.md"), "x", "utf-8")

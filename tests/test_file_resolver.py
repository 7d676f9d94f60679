# topmark:header:start
#
#   project      : TOML Maid
#   file         : test_file_resolver.py
#   file_relpath : tests/test_file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Tests for folder scanning and file list resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.conftest import mark_integration
from tomlmaid.file_resolver import load_patterns_from_file, resolve_file_list, scan_folder


def _touch(root: Path, *rels: str) -> None:
    for rel in rels:
        path: Path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("a = 1\n", encoding="utf-8")


def _rels(root: Path, paths: list[Path]) -> list[str]:
    return [p.relative_to(root).as_posix() for p in paths]


@mark_integration
def test_scan_collects_toml_files_sorted(tmp_path: Path) -> None:
    _touch(tmp_path, "b.toml", "a.toml", "sub/c.toml", "notes.txt", "sub/deeper/d.toml")

    assert _rels(tmp_path, scan_folder(tmp_path)) == [
        "a.toml",
        "b.toml",
        "sub/c.toml",
        "sub/deeper/d.toml",
    ]


@mark_integration
def test_scan_skips_hidden_entries_and_own_config(tmp_path: Path) -> None:
    _touch(tmp_path, ".hidden.toml", ".cache/x.toml", "toml-maid.toml", "sub/toml-maid.toml", "ok.toml")

    assert _rels(tmp_path, scan_folder(tmp_path)) == ["ok.toml"]


@mark_integration
def test_scan_honors_nested_gitignore_files(tmp_path: Path) -> None:
    _touch(tmp_path, "keep.toml", "target/out.toml", "pkg/gen.toml", "pkg/src.toml", "other/gen.toml")
    (tmp_path / ".gitignore").write_text("# build output\ntarget/\n", encoding="utf-8")
    (tmp_path / "pkg" / ".gitignore").write_text("gen.toml\n", encoding="utf-8")

    assert _rels(tmp_path, scan_folder(tmp_path)) == [
        "keep.toml",
        "other/gen.toml",
        "pkg/src.toml",
    ]


@mark_integration
def test_scan_applies_config_excludes_relative_to_folder(tmp_path: Path) -> None:
    _touch(tmp_path, "a.toml", "vendor/v.toml", "fixtures/bad.toml", "fixtures/good.toml")

    found = scan_folder(tmp_path, excludes=["vendor/", "fixtures/bad.toml"])

    assert _rels(tmp_path, found) == ["a.toml", "fixtures/good.toml"]


def test_scan_rejects_missing_folder(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        scan_folder(tmp_path / "missing")


def test_load_patterns_skips_comments_and_blank_lines(tmp_path: Path) -> None:
    path: Path = tmp_path / ".gitignore"
    path.write_text("# c\n\n*.bak\n  \nbuild/\n", encoding="utf-8")

    assert load_patterns_from_file(path) == ["*.bak", "build/"]
    assert load_patterns_from_file(tmp_path / "nope") == []


@mark_integration
def test_resolve_file_list_keeps_explicit_files_first_and_dedupes(tmp_path: Path) -> None:
    _touch(tmp_path, "a.toml", "b.toml")
    explicit: list[Path] = [tmp_path / "b.toml", tmp_path / "missing.toml", tmp_path / "b.toml"]

    resolved = resolve_file_list(explicit, [tmp_path])

    assert _rels(tmp_path, resolved) == ["b.toml", "missing.toml", "a.toml"]


def test_resolve_file_list_does_not_filter_explicit_files(tmp_path: Path) -> None:
    _touch(tmp_path, "vendor/x.toml", "toml-maid.toml")
    explicit: list[Path] = [tmp_path / "vendor" / "x.toml", tmp_path / "toml-maid.toml"]

    assert resolve_file_list(explicit, [], excludes=["vendor/"]) == explicit

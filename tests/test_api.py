# topmark:header:start
#
#   project      : TOML Maid
#   file         : test_api.py
#   file_relpath : tests/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Tests for the public API (`tomlmaid.api`)."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.conftest import make_config, mark_integration
from tomlmaid import api
from tomlmaid.config import ConfigError, resolve_config
from tomlmaid.document import ParseError

REPO_ROOT: Path = Path(__file__).resolve().parent.parent


def test_format_text_accepts_mapping_and_config() -> None:
    source = 'version = "1"\nname = "x"\nb = 1\n'
    expected = 'name = "x"\nversion = "1"\nb = 1\n'

    assert api.format_text(source, {"keys": ["name", "version"]}) == expected
    assert api.format_text(source, make_config(keys=["name", "version"])) == expected
    assert api.is_formatted(expected, {"keys": ["name", "version"]})


def test_format_text_errors() -> None:
    with pytest.raises(ParseError):
        api.format_text("a = [\n", {})
    with pytest.raises(ConfigError):
        api.format_text("a = 1\n", {"sort-arrays": "yes"})


def test_format_text_discovers_config(isolation: Path) -> None:
    (isolation / "toml-maid.toml").write_text('keys = ["z"]\n', encoding="utf-8")

    assert api.format_text("a = 1\nz = 2\n") == "z = 2\na = 1\n"


def test_check_files_outcomes(tmp_path: Path) -> None:
    sorted_file: Path = tmp_path / "ok.toml"
    sorted_file.write_text("a = 1\n", encoding="utf-8")
    unsorted: Path = tmp_path / "todo.toml"
    unsorted.write_text("b = 1\na = 2\n", encoding="utf-8")
    broken: Path = tmp_path / "bad.toml"
    broken.write_text("a = \n", encoding="utf-8")

    run = api.check_files([sorted_file, unsorted, broken, tmp_path / "gone.toml"], {}, diff=True)

    outcomes = [f.outcome for f in run.files]
    assert outcomes == [
        api.Outcome.UNCHANGED,
        api.Outcome.WOULD_CHANGE,
        api.Outcome.ERROR,
        api.Outcome.ERROR,
    ]
    assert run.had_errors and run.would_change
    assert run.summary == {"unchanged": 1, "would_change": 1, "error": 2}
    assert run.files[1].diff is not None and "+b = 1" in run.files[1].diff
    assert run.files[0].diff is None
    assert run.files[2].message == "line 1, column 5: Unexpected character: '\\n'"
    assert run.files[3].message is not None and run.files[3].message.startswith("File not found")
    assert unsorted.read_text(encoding="utf-8") == "b = 1\na = 2\n"


def test_format_files_writes(tmp_path: Path) -> None:
    path: Path = tmp_path / "a.toml"
    path.write_text("b = 1\na = 2\n", encoding="utf-8")

    run = api.format_files([str(path)], {}, jobs=2)

    assert [f.outcome for f in run.files] == [api.Outcome.CHANGED]
    assert not run.had_errors and not run.would_change
    assert path.read_text(encoding="utf-8") == "a = 2\nb = 1\n"

    again = api.format_files([path], {})
    assert [f.outcome for f in again.files] == [api.Outcome.UNCHANGED]


@mark_integration
def test_repository_toml_files_are_formatted() -> None:
    """The project's own manifest passes ``toml-maid --check`` under its own config."""
    config = resolve_config(REPO_ROOT)
    assert config.config_file == REPO_ROOT / "toml-maid.toml"

    run = api.check_files(
        [REPO_ROOT / "pyproject.toml", REPO_ROOT / "toml-maid.toml"], config, diff=True
    )

    assert [f.diff for f in run.files] == [None, None]
    assert [f.outcome for f in run.files] == [api.Outcome.UNCHANGED, api.Outcome.UNCHANGED]

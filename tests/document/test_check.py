# topmark:header:start
#
#   project      : TOML Maid
#   file         : test_check.py
#   file_relpath : tests/document/test_check.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Tests for the text-level entry points `format_text` and `is_formatted`."""

from __future__ import annotations

import pytest
import tomlkit

from tests.conftest import make_config
from tomlmaid.document import ParseError, format_text, is_formatted

CARGO_LIKE: str = """\
# Package manifest
[package]
version = "0.3.0"
name = "demo"
authors = ["b <b@example.com>", "a <a@example.com>"]
edition = "2021"

# Build settings
description = "A demo"   # short
build = "build.rs"

[dependencies]
serde = { version = "1", features = ["derive", "alloc"], default-features = false }
anyhow = "1"
# pinned for MSRV
clap = { version = "4.4", optional = true }

[[bin]]
path = "src/main.rs"
name = "demo"
"""


def test_check_mode_scenario() -> None:
    config = make_config()
    original = "c = 3\na = 1\n\nb = 2\n"
    canonical = "a = 1\nc = 3\n\nb = 2\n"

    assert not is_formatted(original, config)
    assert is_formatted(canonical, config)
    assert format_text(original, config) == canonical


def test_format_is_idempotent_on_manifest() -> None:
    config = make_config(keys=["name", "version"], inline_keys=["version"], sort_arrays=True)

    once = format_text(CARGO_LIKE, config)
    twice = format_text(once, config)

    assert once != CARGO_LIKE
    assert twice == once
    assert is_formatted(once, config)


def test_format_preserves_document_semantics() -> None:
    config = make_config(keys=["name", "version"], inline_keys=["version"])

    formatted = format_text(CARGO_LIKE, config)

    assert tomlkit.parse(formatted).unwrap() == tomlkit.parse(CARGO_LIKE).unwrap()
    assert formatted.splitlines()[:4] == [
        "# Package manifest",
        "[package]",
        'name = "demo"',
        'version = "0.3.0"',
    ]
    assert 'serde = { version = "1", default-features = false, features = ["derive", "alloc"] }' in (
        formatted
    )
    assert "anyhow = \"1\"\n# pinned for MSRV\nclap = " in formatted


def test_format_raises_parse_error() -> None:
    with pytest.raises(ParseError):
        format_text("a = [1,\n", make_config())

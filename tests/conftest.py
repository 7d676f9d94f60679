# topmark:header:start
#
#   project      : TOML Maid
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Pytest configuration for the TOML Maid test suite.

This file sets up global fixtures and typed decorator wrappers, and raises the
log level to TRACE so failing tests show the parser and sorter traces.

Notes:
    Build configs with `make_config` (or `MutableConfig` + `freeze()`). Do not
    mutate a frozen `Config`; call `Config.thaw()` and freeze again instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from tomlmaid.config import MutableConfig
from tomlmaid.config import logging as maid_logging

if TYPE_CHECKING:
    from pathlib import Path

    from tomlmaid.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_maid_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop the environment variable.
    """
    monkeypatch.delenv(maid_logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session."""
    maid_logging.setup_logging(level=maid_logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an empty project directory.

    Config discovery walks upward from the working directory, so the directory
    gets an empty ``toml-maid.toml`` to stop discovery from picking up a file
    outside the temporary tree.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "toml-maid.toml").write_text("", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Field overrides applied to the mutable builder
            (e.g. ``keys=["name", "version"]``, ``sort_arrays=True``).

    Returns:
        Config: An immutable configuration snapshot.
    """
    m: MutableConfig = MutableConfig()
    for k, v in overrides.items():
        setattr(m, k, list(v) if isinstance(v, tuple) else v)
    return m.freeze()

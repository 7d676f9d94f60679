# topmark:header:start
#
#   project      : TOML Maid
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""TOML Maid project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).
  - `lint`: Ruff lint.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).
  - `self_check`: Run ``toml-maid --check`` on the repository's own TOML files.

Common invocations:
  - `nox -s lint`
  - `nox -s qa`
"""

from __future__ import annotations

import nox

PYTHONS: list[str] = ["3.10", "3.11", "3.12", "3.13"]

nox.options.sessions = ["lint", "format_check", "qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.install("-e", ".[dev]")
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)
    session.run("pyright", "--pythonversion", str(session.python))


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests only."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Run Ruff lint."""
    session.install("ruff")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting."""
    session.install("ruff")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Apply formatting."""
    session.install("ruff")
    session.run("ruff", "format", ".")


@nox.session
def self_check(session: nox.Session) -> None:
    """Check that the repository's own TOML files are formatted."""
    session.install("-e", ".")
    session.run("toml-maid", "--check", "pyproject.toml", "toml-maid.toml")

# topmark:header:start
#
#   project      : TOML Maid
#   file         : console.py
#   file_relpath : src/tomlmaid/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Console for user-facing program output, separate from logging.

``--silent`` maps to ``quiet=True``: informational `print` output is dropped,
while warnings and errors still reach stderr.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from tomlmaid.cli.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
        quiet (bool): Whether informational output is suppressed.
        out (TextIO): Stream for standard output (defaults to sys.stdout).
        err (TextIO): Stream for error output (defaults to sys.stderr).
    """

    enable_color: bool
    quiet: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        quiet: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.quiet = quiet
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write an informational message to stdout (suppressed when quiet)."""
        if self.quiet:
            return
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style (plain text if color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

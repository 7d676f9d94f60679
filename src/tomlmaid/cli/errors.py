# topmark:header:start
#
#   project      : TOML Maid
#   file         : errors.py
#   file_relpath : src/tomlmaid/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Exceptions for the TOML Maid CLI.

Raise these to abort the whole run with a standardized message and exit code.
Per-file failures are not raised: they are recorded on each file's context and
folded into the final exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tomlmaid.cli.exit_codes import ExitCode


class MaidError(click.ClickException):
    """Base class for all TOML Maid CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class MaidUsageError(MaidError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class MaidConfigError(MaidError):
    """Error for an unreadable or invalid ``toml-maid.toml``."""

    exit_code = ExitCode.CONFIG_ERROR


class MaidFileNotFoundError(MaidError):
    """Error when an input folder does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MaidIOError(MaidError):
    """Error for I/O errors outside per-file processing (e.g. while scanning)."""

    exit_code = ExitCode.IO_ERROR

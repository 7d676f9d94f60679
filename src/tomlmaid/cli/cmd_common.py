# topmark:header:start
#
#   project      : TOML Maid
#   file         : cmd_common.py
#   file_relpath : src/tomlmaid/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Shared helpers for reporting per-file results and computing the exit code.

Exit code mapping (first error in input order wins; any error outranks
``WOULD_CHANGE``):
    FILE_NOT_FOUND → file missing (or a directory)
    PERMISSION_DENIED → read or write permission denied
    PARSE_ERROR → malformed TOML or invalid UTF-8
    IO_ERROR → any other read/write failure
    UNEXPECTED_ERROR → unexpected exception while processing the file
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tomlmaid.cli.exit_codes import ExitCode
from tomlmaid.config.logging import get_logger
from tomlmaid.pipeline.status import (
    ComparisonStatus,
    FileStatus,
    FormatStatus,
    WriteStatus,
)
from tomlmaid.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tomlmaid.cli.console_api import ConsoleLike
    from tomlmaid.config.logging import MaidLogger
    from tomlmaid.pipeline.context import ProcessingContext
    from tomlmaid.rendering.colored_enum import ColoredStrEnum

logger: MaidLogger = get_logger(__name__)

_FILE_STATUS_EXIT_CODES: dict[FileStatus, ExitCode] = {
    FileStatus.NOT_FOUND: ExitCode.FILE_NOT_FOUND,
    FileStatus.NO_READ_PERMISSION: ExitCode.PERMISSION_DENIED,
    FileStatus.UNICODE_DECODE_ERROR: ExitCode.PARSE_ERROR,
    FileStatus.UNREADABLE: ExitCode.IO_ERROR,
}

_WRITE_STATUS_EXIT_CODES: dict[WriteStatus, ExitCode] = {
    WriteStatus.NO_WRITE_PERMISSION: ExitCode.PERMISSION_DENIED,
    WriteStatus.FAILED: ExitCode.IO_ERROR,
}


def exit_code_for(result: ProcessingContext) -> ExitCode | None:
    """Return the error exit code for one file, or None if it was processed cleanly."""
    if result.error is not None:
        return ExitCode.UNEXPECTED_ERROR
    if result.status.file in _FILE_STATUS_EXIT_CODES:
        return _FILE_STATUS_EXIT_CODES[result.status.file]
    if result.status.format == FormatStatus.PARSE_ERROR:
        return ExitCode.PARSE_ERROR
    return _WRITE_STATUS_EXIT_CODES.get(result.status.write)


def aggregate_exit_code(results: Sequence[ProcessingContext], *, check: bool) -> ExitCode:
    """Fold per-file results into the process exit code."""
    for result in results:
        code: ExitCode | None = exit_code_for(result)
        if code is not None:
            return code
    if check and any(r.would_change for r in results):
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS


def _status_text(status: ColoredStrEnum, enable_color: bool) -> str:
    return status.colored() if enable_color else status.value


def report_result(
    console: ConsoleLike,
    result: ProcessingContext,
    *,
    check: bool,
    show_diff: bool = False,
    enable_color: bool = True,
) -> None:
    """Emit the user-facing message(s) for one processed file.

    Errors and failed checks go to stderr and are always shown; success messages
    go through `ConsoleLike.print` and are dropped in silent mode.
    """
    path: str = str(result.path)

    if result.error is not None:
        console.error(f"Unexpected error processing {path}: {result.error}")
        return
    if result.status.file not in (FileStatus.OK, FileStatus.PENDING):
        detail: str = result.diagnostics[-1] if result.diagnostics else result.status.file.value
        console.error(f"Error while reading {path}: {detail}")
        return
    if result.status.format == FormatStatus.PARSE_ERROR:
        console.error(f"Parse error in {path}: {result.parse_error}")
        return

    if show_diff and result.status.comparison == ComparisonStatus.CHANGED:
        assert result.original is not None and result.formatted is not None
        lines: list[str] = unified_diff(result.original, result.formatted, path=path)
        console.print(render_patch(lines) if enable_color else "".join(lines), nl=False)

    if result.status.write in _WRITE_STATUS_EXIT_CODES:
        status_text: str = _status_text(result.status.write, enable_color)
        detail = result.diagnostics[-1] if result.diagnostics else ""
        console.error(f"Error while writing {path} ({status_text}): {detail}")
        return

    changed: bool = result.status.comparison == ComparisonStatus.CHANGED
    if check:
        if changed:
            console.error(f"Check failed: {path}")
        else:
            console.print(f"Check succeeded: {console.styled(path, fg='green')}")
    elif result.status.write == WriteStatus.WRITTEN:
        console.print(f"Overwritten: {console.styled(path, fg='blue')}")
    elif not changed:
        console.print(f"Unchanged: {console.styled(path, fg='green')}")
    logger.debug("Result for %s: %s", path, result.to_dict())

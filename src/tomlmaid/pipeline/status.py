# topmark:header:start
#
#   project      : TOML Maid
#   file         : status.py
#   file_relpath : src/tomlmaid/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Status enums for each axis of the per-file pipeline.

Each axis is written by exactly one step:

* ``file``: `ReaderStep`
* ``format``: `FormatterStep`
* ``comparison``: `ComparerStep`
* ``write``: `WriterStep`

Values are human-readable strings used in CLI output; compare members with
``==``, not ``is``.
"""

from __future__ import annotations

from dataclasses import dataclass

from yachalk import chalk

from tomlmaid.rendering.colored_enum import ColoredStrEnum


class FileStatus(ColoredStrEnum):
    """Outcome of reading the file from disk."""

    PENDING = ("pending", chalk.gray)
    OK = ("ok", chalk.green)
    NOT_FOUND = ("not found", chalk.red)
    NO_READ_PERMISSION = ("no read permission", chalk.red_bright)
    UNICODE_DECODE_ERROR = ("not valid UTF-8", chalk.yellow)
    UNREADABLE = ("read error", chalk.red_bright)


class FormatStatus(ColoredStrEnum):
    """Outcome of parsing and sorting the document."""

    PENDING = ("format pending", chalk.gray)
    FORMATTED = ("formatted", chalk.green)
    PARSE_ERROR = ("parse error", chalk.red_bright)
    SKIPPED = ("format skipped", chalk.yellow)


class ComparisonStatus(ColoredStrEnum):
    """Outcome of comparing the formatted text with the original."""

    PENDING = ("comparison pending", chalk.gray)
    CHANGED = ("changes found", chalk.red)
    UNCHANGED = ("no changes found", chalk.green)
    SKIPPED = ("comparison skipped", chalk.yellow)


class WriteStatus(ColoredStrEnum):
    """Outcome of writing the formatted text back to disk."""

    PENDING = ("write pending", chalk.gray)
    WRITTEN = ("written", chalk.green)
    SKIPPED = ("write skipped", chalk.yellow)
    NO_WRITE_PERMISSION = ("no write permission", chalk.red_bright)
    FAILED = ("write failed", chalk.red_bright)


@dataclass
class ProcessingStatus:
    """Per-axis statuses of one file."""

    file: FileStatus = FileStatus.PENDING
    format: FormatStatus = FormatStatus.PENDING
    comparison: ComparisonStatus = ComparisonStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING

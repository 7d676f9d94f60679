# topmark:header:start
#
#   project      : TOML Maid
#   file         : context.py
#   file_relpath : src/tomlmaid/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Per-file processing context.

A `ProcessingContext` is created for every input file and threaded through the
pipeline steps, which record their results on it. Contexts are never shared
between files, so files can be processed on independent worker threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tomlmaid.config.logging import get_logger
from tomlmaid.pipeline.status import (
    ComparisonStatus,
    FileStatus,
    FormatStatus,
    ProcessingStatus,
    WriteStatus,
)

if TYPE_CHECKING:
    from pathlib import Path

    from tomlmaid.config.logging import MaidLogger
    from tomlmaid.config.model import Config
    from tomlmaid.document.errors import ParseError
    from tomlmaid.pipeline.steps.base import BaseStep

logger: MaidLogger = get_logger(__name__)


@dataclass
class ProcessingContext:
    """Mutable state for processing a single file.

    Attributes:
        path (Path): The file being processed.
        config (Config): Shared, read-only configuration.
        apply_changes (bool): Whether the writer step may write to disk.
        status (ProcessingStatus): Per-axis statuses.
        original (str | None): File content as read (decoded, newlines untouched).
        formatted (str | None): Formatted content, once computed.
        parse_error (ParseError | None): Parse failure, if any.
        error (BaseException | None): Unexpected failure caught by the runner, if any.
        diagnostics (list[str]): Human-readable messages collected by the steps.
        steps (list[BaseStep]): Steps invoked so far, in order.
        halted (bool): Set when a step stops the pipeline for this file.
        halt_reason (str | None): Why the pipeline was halted.
    """

    path: Path
    config: Config
    apply_changes: bool = False
    status: ProcessingStatus = field(default_factory=ProcessingStatus)
    original: str | None = None
    formatted: str | None = None
    parse_error: ParseError | None = None
    error: BaseException | None = None
    diagnostics: list[str] = field(default_factory=lambda: [])
    steps: list[BaseStep] = field(default_factory=lambda: [])
    halted: bool = False
    halt_reason: str | None = None

    @classmethod
    def bootstrap(cls, *, path: Path, config: Config, apply_changes: bool = False) -> ProcessingContext:
        """Create a fresh context for ``path``."""
        return cls(path=path, config=config, apply_changes=apply_changes)

    @property
    def is_halted(self) -> bool:
        return self.halted

    def request_halt(self, *, reason: str, at_step: BaseStep) -> None:
        """Stop running further steps for this file."""
        self.halted = True
        self.halt_reason = reason
        logger.debug("Pipeline halted for %s at %s: %s", self.path, at_step.name, reason)

    def add_diagnostic(self, message: str) -> None:
        self.diagnostics.append(message)

    @property
    def would_change(self) -> bool:
        """Whether formatting changes the file content."""
        return self.status.comparison == ComparisonStatus.CHANGED

    @property
    def failed(self) -> bool:
        """Whether processing this file hit an error (I/O, parse, write or unexpected)."""
        return (
            self.error is not None
            or self.status.file not in (FileStatus.PENDING, FileStatus.OK)
            or self.status.format == FormatStatus.PARSE_ERROR
            or self.status.write in (WriteStatus.NO_WRITE_PERMISSION, WriteStatus.FAILED)
        )

    def to_dict(self) -> dict[str, object]:
        """Return a compact, log-friendly summary."""
        return {
            "path": str(self.path),
            "file": self.status.file.value,
            "format": self.status.format.value,
            "comparison": self.status.comparison.value,
            "write": self.status.write.value,
            "halted": self.halted,
            "diagnostics": list(self.diagnostics),
        }

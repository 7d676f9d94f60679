# topmark:header:start
#
#   project      : TOML Maid
#   file         : writer.py
#   file_relpath : src/tomlmaid/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Writer step: commit formatted content to the selected sink.

A `NullSink` is used in check mode (``apply_changes`` is False); otherwise the
`FileSystemSink` rewrites the file in place, with ``newline=""`` so that the
original line endings are written back unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from tomlmaid.config.logging import get_logger
from tomlmaid.pipeline.status import ComparisonStatus, WriteStatus
from tomlmaid.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from tomlmaid.config.logging import MaidLogger
    from tomlmaid.pipeline.context import ProcessingContext

logger: MaidLogger = get_logger(__name__)


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for write sinks used by the writer step."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult: ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        return WriteResult(status=WriteStatus.SKIPPED)


class FileSystemSink:
    """Filesystem sink that writes in place to ``ctx.path``."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        assert ctx.formatted is not None
        with open(ctx.path, "w", encoding="utf-8", newline="") as f:
            f.write(ctx.formatted)
        bytes_written: int = len(ctx.formatted.encode("utf-8"))
        logger.debug("FileSystemSink: wrote %d bytes to file %s", bytes_written, ctx.path)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=bytes_written)


def select_sink(ctx: ProcessingContext) -> WriteSink:
    """Return `FileSystemSink` when applying changes, else `NullSink`."""
    if not ctx.apply_changes:
        return NullSink()
    return FileSystemSink()


class WriterStep(BaseStep):
    """Write changed files.

    Sets:
      - WriteStatus: {WRITTEN, SKIPPED, NO_WRITE_PERMISSION, FAILED}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        if ctx.status.comparison != ComparisonStatus.CHANGED:
            ctx.status.write = WriteStatus.SKIPPED
            return False
        return True

    def run(self, ctx: ProcessingContext) -> None:
        sink: WriteSink = select_sink(ctx)
        try:
            result: WriteResult = sink.write(ctx=ctx)
        except PermissionError as e:
            self._fail(ctx, WriteStatus.NO_WRITE_PERMISSION, f"Permission denied: {e.strerror or e}")
            return
        except OSError as e:
            self._fail(ctx, WriteStatus.FAILED, f"Write failed: {e.strerror or e}")
            return
        ctx.status.write = result.status

    def _fail(self, ctx: ProcessingContext, status: WriteStatus, reason: str) -> None:
        logger.error("%s: %s", ctx.path, reason)
        ctx.status.write = status
        ctx.add_diagnostic(reason)

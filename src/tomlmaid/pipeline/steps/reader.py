# topmark:header:start
#
#   project      : TOML Maid
#   file         : reader.py
#   file_relpath : src/tomlmaid/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""File reader step.

Loads the file as UTF-8 text with ``newline=""`` so that ``\\r\\n`` line endings
and a leading BOM survive untouched, and sets `FileStatus`. Read failures halt
the pipeline for the file; other files are unaffected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tomlmaid.config.logging import get_logger
from tomlmaid.pipeline.status import FileStatus
from tomlmaid.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from tomlmaid.config.logging import MaidLogger
    from tomlmaid.pipeline.context import ProcessingContext

logger: MaidLogger = get_logger(__name__)


class ReaderStep(BaseStep):
    """Read the file content into ``ctx.original``.

    Sets:
      - FileStatus: {OK, NOT_FOUND, NO_READ_PERMISSION, UNICODE_DECODE_ERROR, UNREADABLE}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: ProcessingContext) -> None:
        try:
            with open(ctx.path, encoding="utf-8", newline="") as f:
                ctx.original = f.read()
        except (FileNotFoundError, IsADirectoryError) as e:
            status, reason = FileStatus.NOT_FOUND, f"File not found: {e.strerror or e}"
        except PermissionError as e:
            status, reason = FileStatus.NO_READ_PERMISSION, f"Permission denied: {e.strerror or e}"
        except UnicodeDecodeError as e:
            status, reason = FileStatus.UNICODE_DECODE_ERROR, f"Not valid UTF-8: {e.reason}"
        except OSError as e:
            status, reason = FileStatus.UNREADABLE, f"Read error: {e.strerror or e}"
        else:
            ctx.status.file = FileStatus.OK
            logger.debug("Read %d characters from %s", len(ctx.original), ctx.path)
            return

        logger.error("%s: %s", ctx.path, reason)
        ctx.status.file = status
        ctx.add_diagnostic(reason)
        ctx.request_halt(reason=reason, at_step=self)

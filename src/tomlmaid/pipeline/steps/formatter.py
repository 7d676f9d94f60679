# topmark:header:start
#
#   project      : TOML Maid
#   file         : formatter.py
#   file_relpath : src/tomlmaid/pipeline/steps/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Formatter step: parse, sort and re-serialize the file content."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tomlmaid.config.logging import get_logger
from tomlmaid.document.check import format_text
from tomlmaid.document.errors import ParseError
from tomlmaid.pipeline.status import FileStatus, FormatStatus
from tomlmaid.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from tomlmaid.config.logging import MaidLogger
    from tomlmaid.pipeline.context import ProcessingContext

logger: MaidLogger = get_logger(__name__)


class FormatterStep(BaseStep):
    """Compute ``ctx.formatted`` from ``ctx.original``.

    Sets:
      - FormatStatus: {FORMATTED, PARSE_ERROR, SKIPPED}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        if ctx.status.file != FileStatus.OK or ctx.original is None:
            ctx.status.format = FormatStatus.SKIPPED
            return False
        return True

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.original is not None
        try:
            ctx.formatted = format_text(ctx.original, ctx.config)
        except ParseError as e:
            logger.error("Cannot parse %s: %s", ctx.path, e)
            ctx.status.format = FormatStatus.PARSE_ERROR
            ctx.parse_error = e
            ctx.add_diagnostic(str(e))
            ctx.request_halt(reason="parse error", at_step=self)
            return
        ctx.status.format = FormatStatus.FORMATTED

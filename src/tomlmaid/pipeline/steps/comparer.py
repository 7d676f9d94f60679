# topmark:header:start
#
#   project      : TOML Maid
#   file         : comparer.py
#   file_relpath : src/tomlmaid/pipeline/steps/comparer.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Comparer step: decide whether formatting changes the file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tomlmaid.config.logging import get_logger
from tomlmaid.pipeline.status import ComparisonStatus, FormatStatus
from tomlmaid.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from tomlmaid.config.logging import MaidLogger
    from tomlmaid.pipeline.context import ProcessingContext

logger: MaidLogger = get_logger(__name__)


class ComparerStep(BaseStep):
    """Compare ``ctx.formatted`` with ``ctx.original`` byte for byte.

    Sets:
      - ComparisonStatus: {CHANGED, UNCHANGED, SKIPPED}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        if ctx.status.format != FormatStatus.FORMATTED:
            ctx.status.comparison = ComparisonStatus.SKIPPED
            return False
        return True

    def run(self, ctx: ProcessingContext) -> None:
        if ctx.formatted == ctx.original:
            ctx.status.comparison = ComparisonStatus.UNCHANGED
        else:
            ctx.status.comparison = ComparisonStatus.CHANGED
        logger.debug("%s: %s", ctx.path, ctx.status.comparison.value)

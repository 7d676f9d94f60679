# topmark:header:start
#
#   project      : TOML Maid
#   file         : base.py
#   file_relpath : src/tomlmaid/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*; `BaseStep` implements the common
lifecycle::

    ctx = step(ctx)  # internally: may_proceed → run
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tomlmaid.config.logging import get_logger

if TYPE_CHECKING:
    from tomlmaid.config.logging import MaidLogger
    from tomlmaid.pipeline.context import ProcessingContext

logger: MaidLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclasses override ``may_proceed()`` and ``run()``; ``__call__`` handles
    bookkeeping and halting.

    Attributes:
        name (str): Stable step identifier for logs.
    """

    name: str

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        ctx.steps.append(self)
        if ctx.is_halted:
            logger.trace("Step %s skipped for %s (halted)", self.name, ctx.path)
            return ctx
        if self.may_proceed(ctx):
            logger.trace("Step %s running for %s", self.name, ctx.path)
            self.run(ctx)
        else:
            logger.trace("Step %s may not proceed for %s", self.name, ctx.path)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context."""
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's work, mutating ``ctx`` in place."""
        raise NotImplementedError

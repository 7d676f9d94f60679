# topmark:header:start
#
#   project      : TOML Maid
#   file         : runner.py
#   file_relpath : src/tomlmaid/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Run a pipeline for one file, or for many files on a thread pool.

Each file gets its own `ProcessingContext`; the `Config` is shared read-only.
An unexpected exception while processing one file is recorded on its context
and does not affect the others.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from tomlmaid.config.logging import get_logger
from tomlmaid.pipeline.context import ProcessingContext

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from tomlmaid.config.logging import MaidLogger
    from tomlmaid.config.model import Config
    from tomlmaid.pipeline.steps.base import BaseStep

logger: MaidLogger = get_logger(__name__)


def run(ctx: ProcessingContext, steps: Sequence[BaseStep]) -> ProcessingContext:
    """Execute the pipeline sequentially on ``ctx``.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[BaseStep]): Ordered pipeline steps.

    Returns:
        ProcessingContext: The final processing context after all steps have run.
    """
    for step in steps:
        ctx = step(ctx)
    return ctx


def process_file(
    path: Path,
    *,
    config: Config,
    steps: Sequence[BaseStep],
    apply_changes: bool = False,
) -> ProcessingContext:
    """Run ``steps`` for a single file, isolating unexpected failures."""
    ctx: ProcessingContext = ProcessingContext.bootstrap(
        path=path, config=config, apply_changes=apply_changes
    )
    try:
        return run(ctx, steps)
    except Exception as e:
        logger.exception("Unexpected error processing %s", path)
        ctx.error = e
        ctx.add_diagnostic(f"Unexpected error: {e}")
        return ctx


def run_all(
    paths: Sequence[Path],
    *,
    config: Config,
    steps: Sequence[BaseStep],
    apply_changes: bool = False,
    jobs: int = 1,
) -> list[ProcessingContext]:
    """Process ``paths`` and return one context per path, in input order.

    Args:
        paths (Sequence[Path]): Files to process.
        config (Config): Shared configuration.
        steps (Sequence[BaseStep]): Pipeline to run for each file.
        apply_changes (bool): Whether changed files are written back.
        jobs (int): Number of worker threads; 1 processes files sequentially.

    Returns:
        list[ProcessingContext]: Per-file results in the order of ``paths``.
    """
    logger.debug("Processing %d file(s) with %d job(s)", len(paths), jobs)
    if jobs <= 1 or len(paths) <= 1:
        return [
            process_file(p, config=config, steps=steps, apply_changes=apply_changes) for p in paths
        ]
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        return list(
            pool.map(
                lambda p: process_file(p, config=config, steps=steps, apply_changes=apply_changes),
                paths,
            )
        )

# topmark:header:start
#
#   project      : TOML Maid
#   file         : pipelines.py
#   file_relpath : src/tomlmaid/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Named pipeline variants (immutable step sequences).

- ``CHECK``: read → format → compare
- ``APPLY``: CHECK + write

Both pipelines end with the writer when applying; in check mode the writer's
`NullSink` never touches the file, so ``APPLY`` with ``apply_changes=False``
behaves like ``CHECK``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from tomlmaid.pipeline.steps.comparer import ComparerStep
from tomlmaid.pipeline.steps.formatter import FormatterStep
from tomlmaid.pipeline.steps.reader import ReaderStep
from tomlmaid.pipeline.steps.writer import WriterStep

if TYPE_CHECKING:
    from tomlmaid.pipeline.steps.base import BaseStep

CHECK_PIPELINE: Final[tuple[BaseStep, ...]] = (
    ReaderStep(),
    FormatterStep(),
    ComparerStep(),
)

APPLY_PIPELINE: Final[tuple[BaseStep, ...]] = (
    *CHECK_PIPELINE,
    WriterStep(),
)


class Pipeline(Enum):
    """Registry of named pipelines."""

    CHECK = CHECK_PIPELINE
    APPLY = APPLY_PIPELINE

    @property
    def steps(self) -> tuple[BaseStep, ...]:
        return self.value

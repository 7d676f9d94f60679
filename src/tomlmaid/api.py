# topmark:header:start
#
#   project      : TOML Maid
#   file         : api.py
#   file_relpath : src/tomlmaid/api.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Public TOML Maid API (stable surface).

A small, typed API for integrations that want to format TOML without going
through the CLI:

```python
from tomlmaid import api

text = api.format_text('b = 1\\na = 2\\n', {"keys": ["b"]})
run = api.check_files(["pyproject.toml"])
if run.had_errors or run.would_change:
    ...
```

Configuration contract:
    Functions accept ``config`` as a frozen `tomlmaid.config.Config`, a plain
    mapping mirroring the ``toml-maid.toml`` shape, or None to discover
    ``toml-maid.toml`` from the current working directory (as the CLI does).

Writes are performed exclusively by the pipeline writer step; the API only
reports the statuses determined by the pipeline.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

from tomlmaid.config.model import Config, MutableConfig, resolve_config
from tomlmaid.document import check as _check
from tomlmaid.pipeline.pipelines import Pipeline
from tomlmaid.pipeline.runner import run_all
from tomlmaid.pipeline.status import ComparisonStatus, WriteStatus
from tomlmaid.utils.diff import unified_diff

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from tomlmaid.pipeline.context import ProcessingContext

ConfigLike = Union[Config, Mapping[str, Any], None]


class Outcome(str, Enum):
    """Per-file outcome bucket.

    Values mirror CLI semantics:
      - ``UNCHANGED``: The file is already formatted.
      - ``WOULD_CHANGE``: Check mode found the file is not formatted.
      - ``CHANGED``: The file was rewritten.
      - ``ERROR``: The file could not be processed.
    """

    UNCHANGED = "unchanged"
    WOULD_CHANGE = "would_change"
    CHANGED = "changed"
    ERROR = "error"


@dataclass(frozen=True)
class FileResult:
    """Result for a single file.

    Attributes:
        path (Path): The file path as given.
        outcome (Outcome): High-level outcome bucket.
        diff (str | None): Unified diff when requested and the file changes.
        message (str | None): Error description for ``ERROR`` outcomes.
    """

    path: Path
    outcome: Outcome
    diff: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class RunResult:
    """Aggregate result of a run.

    Attributes:
        files (Sequence[FileResult]): Per-file results, in input order.
        had_errors (bool): True if any file failed to process.
    """

    files: Sequence[FileResult]
    had_errors: bool

    @property
    def would_change(self) -> bool:
        """Whether any file is not formatted (check mode)."""
        return any(f.outcome == Outcome.WOULD_CHANGE for f in self.files)

    @property
    def summary(self) -> dict[str, int]:
        """Count of files per outcome value."""
        counts: dict[str, int] = {}
        for f in self.files:
            counts[f.outcome.value] = counts.get(f.outcome.value, 0) + 1
        return counts


def _to_config(config: ConfigLike) -> Config:
    if isinstance(config, Config):
        return config
    if config is None:
        return resolve_config(Path.cwd())
    return MutableConfig.from_toml_dict(dict(config)).freeze()


def _to_file_result(ctx: ProcessingContext, *, diff: bool) -> FileResult:
    if ctx.failed:
        message: str | None = ctx.diagnostics[-1] if ctx.diagnostics else None
        if ctx.parse_error is not None:
            message = str(ctx.parse_error)
        return FileResult(path=ctx.path, outcome=Outcome.ERROR, message=message)

    patch: str | None = None
    if diff and ctx.status.comparison == ComparisonStatus.CHANGED:
        assert ctx.original is not None and ctx.formatted is not None
        patch = "".join(unified_diff(ctx.original, ctx.formatted, path=str(ctx.path)))

    if ctx.status.write == WriteStatus.WRITTEN:
        outcome: Outcome = Outcome.CHANGED
    elif ctx.status.comparison == ComparisonStatus.CHANGED:
        outcome = Outcome.WOULD_CHANGE
    else:
        outcome = Outcome.UNCHANGED
    return FileResult(path=ctx.path, outcome=outcome, diff=patch)


def _run(
    paths: Iterable[Path | str],
    config: ConfigLike,
    *,
    apply: bool,
    jobs: int,
    diff: bool,
) -> RunResult:
    resolved: Config = _to_config(config)
    pipeline: Pipeline = Pipeline.APPLY if apply else Pipeline.CHECK
    results: list[ProcessingContext] = run_all(
        [Path(p) for p in paths],
        config=resolved,
        steps=pipeline.steps,
        apply_changes=apply,
        jobs=jobs,
    )
    files: list[FileResult] = [_to_file_result(r, diff=diff) for r in results]
    return RunResult(files=files, had_errors=any(f.outcome == Outcome.ERROR for f in files))


def format_text(text: str, config: ConfigLike = None) -> str:
    """Return ``text`` formatted according to ``config``.

    Raises:
        ParseError: If ``text`` is not well-formed TOML.
        ConfigError: If ``config`` is invalid.
    """
    return _check.format_text(text, _to_config(config))


def is_formatted(text: str, config: ConfigLike = None) -> bool:
    """Return True if formatting ``text`` would not change it."""
    return _check.is_formatted(text, _to_config(config))


def check_files(
    paths: Iterable[Path | str],
    config: ConfigLike = None,
    *,
    jobs: int = 1,
    diff: bool = False,
) -> RunResult:
    """Check files without writing them.

    Args:
        paths (Iterable[Path | str]): Files to check.
        config (ConfigLike): Config, mapping, or None for discovery.
        jobs (int): Number of worker threads.
        diff (bool): Include a unified diff for files that would change.

    Returns:
        RunResult: Per-file outcomes (``UNCHANGED``, ``WOULD_CHANGE`` or ``ERROR``).
    """
    return _run(paths, config, apply=False, jobs=jobs, diff=diff)


def format_files(
    paths: Iterable[Path | str],
    config: ConfigLike = None,
    *,
    jobs: int = 1,
    diff: bool = False,
) -> RunResult:
    """Format files in place.

    Returns:
        RunResult: Per-file outcomes (``UNCHANGED``, ``CHANGED`` or ``ERROR``).
    """
    return _run(paths, config, apply=True, jobs=jobs, diff=diff)

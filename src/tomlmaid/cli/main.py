# topmark:header:start
#
#   project      : TOML Maid
#   file         : main.py
#   file_relpath : src/tomlmaid/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Command-line entry point ``toml-maid``.

Formats TOML files in place (or only checks them with ``--check``), sorting the
keys of every block while keeping blank-line-separated blocks, comments and
value formatting untouched.

Exit Status:
    SUCCESS (0): Every file is formatted, or was rewritten successfully.
    WOULD_CHANGE (2): ``--check`` found files that are not formatted.
    PARSE_ERROR (65): A file is not well-formed TOML.
    FILE_NOT_FOUND (66): A file or folder does not exist.
    IO_ERROR (74), PERMISSION_DENIED (77): A file could not be read or written.
    CONFIG_ERROR (78): ``toml-maid.toml`` is invalid.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tomlmaid.cli.cmd_common import aggregate_exit_code, report_result
from tomlmaid.cli.console import ClickConsole
from tomlmaid.cli.errors import MaidConfigError, MaidFileNotFoundError, MaidIOError, MaidUsageError
from tomlmaid.cli.exit_codes import ExitCode
from tomlmaid.config.errors import ConfigError
from tomlmaid.config.logging import get_logger, resolve_env_log_level, setup_logging
from tomlmaid.config.model import resolve_config
from tomlmaid.constants import CONFIG_FILE_NAME, TOML_MAID_VERSION
from tomlmaid.file_resolver import resolve_file_list
from tomlmaid.pipeline.pipelines import Pipeline
from tomlmaid.pipeline.runner import run_all

if TYPE_CHECKING:
    from tomlmaid.config.logging import MaidLogger
    from tomlmaid.config.model import Config
    from tomlmaid.pipeline.context import ProcessingContext

logger: MaidLogger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, silent: bool, no_color: bool) -> None:
    """Initialize logging and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is set to a dict.
        silent (bool): Whether informational output is suppressed.
        no_color (bool): Whether ANSI colors are disabled.
    """
    ctx.obj = ctx.obj or {}

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj["color_enabled"] = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color, quiet=silent)


def _check_folders(folders: tuple[Path, ...]) -> None:
    for folder in folders:
        if not folder.exists():
            raise MaidFileNotFoundError(f"Folder not found: {folder}")
        if not folder.is_dir():
            raise MaidUsageError(f"--folder expects a directory, got a file: {folder}")


@click.command(
    name="toml-maid",
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Sort the keys of TOML files block by block, keeping blank-line separated "
        "blocks, comments and formatting intact. Without FILE or --folder, the "
        "current directory is scanned."
    ),
)
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--folder",
    "folders",
    multiple=True,
    type=click.Path(path_type=Path),
    help="Scan this folder recursively for .toml files (repeatable).",
)
@click.option(
    "-c",
    "--check",
    is_flag=True,
    help="Do not write; exit with status 2 if a file is not formatted.",
)
@click.option("-s", "--silent", is_flag=True, help="Only report errors and failed checks.")
@click.option("--diff", "show_diff", is_flag=True, help="Show a unified diff for files that change.")
@click.option(
    "-j",
    "--jobs",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of files processed in parallel.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help=f"Use this config file instead of discovering '{CONFIG_FILE_NAME}'.",
)
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.version_option(TOML_MAID_VERSION, "--version", prog_name="toml-maid")
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[Path, ...],
    folders: tuple[Path, ...],
    check: bool,
    silent: bool,
    show_diff: bool,
    jobs: int,
    config_path: Path | None,
    no_color: bool,
) -> None:
    """Entry point for the TOML Maid CLI."""
    init_common_state(ctx, silent=silent, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    try:
        config: Config = resolve_config(Path.cwd(), config_file=config_path)
    except ConfigError as e:
        raise MaidConfigError(str(e)) from e
    if config.config_file is None and not silent:
        console.warn(
            f"No '{CONFIG_FILE_NAME}' in this directory and its parents, using default config."
        )

    if not files and not folders:
        folders = (Path("."),)
    _check_folders(folders)

    try:
        paths: list[Path] = resolve_file_list(files, folders, excludes=config.excludes)
    except OSError as e:
        raise MaidIOError(f"Cannot scan folders: {e}") from e

    if not paths:
        console.print("No TOML files to process.")
        ctx.exit(ExitCode.SUCCESS)

    pipeline: Pipeline = Pipeline.CHECK if check else Pipeline.APPLY
    results: list[ProcessingContext] = run_all(
        paths,
        config=config,
        steps=pipeline.steps,
        apply_changes=not check,
        jobs=jobs,
    )
    for result in results:
        report_result(
            console,
            result,
            check=check,
            show_diff=show_diff,
            enable_color=ctx.obj["color_enabled"],
        )

    ctx.exit(aggregate_exit_code(results, check=check))


if __name__ == "__main__":
    cli()

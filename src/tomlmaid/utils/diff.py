# topmark:header:start
#
#   project      : TOML Maid
#   file         : diff.py
#   file_relpath : src/tomlmaid/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Unified diff generation and colorized rendering for ``--diff``."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def unified_diff(original: str, formatted: str, *, path: str) -> list[str]:
    """Return the unified diff lines (with line endings) from ``original`` to ``formatted``."""
    return list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            formatted.splitlines(keepends=True),
            fromfile=f"{path} (original)",
            tofile=f"{path} (formatted)",
        )
    )


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as a sequence of lines or a
            single multiline string.
        show_line_numbers (bool): Whether to prefix output with line numbers.

    Returns:
        str: The formatted, colorized diff preview. Carriage returns and line
        feeds inside lines are shown escaped so that line-ending changes stay visible.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=True)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        content: str = line.rstrip("\n").replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return content

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)

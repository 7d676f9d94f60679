# topmark:header:start
#
#   project      : TOML Maid
#   file         : errors.py
#   file_relpath : src/tomlmaid/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Configuration errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(ValueError):
    """Invalid or unreadable ``toml-maid.toml``.

    Attributes:
        path (Path | None): The offending config file, if known.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)

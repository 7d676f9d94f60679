# topmark:header:start
#
#   project      : TOML Maid
#   file         : loaders.py
#   file_relpath : src/tomlmaid/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Load ``toml-maid.toml`` configuration files.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Unlike
document formatting, config loading does not need to preserve layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tomlmaid.config.errors import ConfigError
from tomlmaid.config.io.guards import is_toml_table
from tomlmaid.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from tomlmaid.config.logging import MaidLogger

    from .types import TomlTable

logger: MaidLogger = get_logger(__name__)


def parse_toml_dict(text: str, *, path: Path | None = None) -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML source.
        path (Path | None): Source file, used in error messages.

    Returns:
        TomlTable: The parsed content.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        data_any: Any = tomlkit.parse(text).unwrap()
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path or "<string>", e)
        raise ConfigError(f"invalid TOML: {e}", path=path) from e
    if not is_toml_table(data_any):
        raise ConfigError("expected a TOML table at the top level", path=path)
    return data_any


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a ``toml-maid.toml`` file.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read config file: {e.strerror or e}", path=path) from e
    except UnicodeDecodeError as e:
        logger.error("Error decoding %s as UTF-8: %s", path, e)
        raise ConfigError("config file is not valid UTF-8", path=path) from e
    return parse_toml_dict(text, path=path)

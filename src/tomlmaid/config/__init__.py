# topmark:header:start
#
#   project      : TOML Maid
#   file         : __init__.py
#   file_relpath : src/tomlmaid/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Configuration handling for TOML Maid.

Defines the immutable `Config` snapshot, its `MutableConfig` builder, and the
upward discovery of ``toml-maid.toml`` files.
"""

from __future__ import annotations

from tomlmaid.config.errors import ConfigError
from tomlmaid.config.model import Config, MutableConfig, resolve_config

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
    "resolve_config",
]

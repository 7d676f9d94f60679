# topmark:header:start
#
#   project      : TOML Maid
#   file         : __init__.py
#   file_relpath : src/tomlmaid/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""TOML I/O helpers for the configuration layer."""

from __future__ import annotations

from tomlmaid.config.io.guards import is_any_list, is_bool, is_str_list, is_toml_table
from tomlmaid.config.io.loaders import load_toml_dict, parse_toml_dict
from tomlmaid.config.io.types import TomlTable

__all__ = [
    "TomlTable",
    "is_any_list",
    "is_bool",
    "is_str_list",
    "is_toml_table",
    "load_toml_dict",
    "parse_toml_dict",
]

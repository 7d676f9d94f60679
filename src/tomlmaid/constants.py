# topmark:header:start
#
#   project      : TOML Maid
#   file         : constants.py
#   file_relpath : src/tomlmaid/constants.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""TOML Maid Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TOML_MAID_VERSION: str = get_version("toml-maid")

# Name of the per-project configuration file, discovered by walking upward.
CONFIG_FILE_NAME: str = "toml-maid.toml"

TOML_SUFFIX: str = ".toml"
GITIGNORE_NAME: str = ".gitignore"

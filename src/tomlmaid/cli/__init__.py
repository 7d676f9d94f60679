# topmark:header:start
#
#   project      : TOML Maid
#   file         : __init__.py
#   file_relpath : src/tomlmaid/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Click-based command-line interface."""

from __future__ import annotations

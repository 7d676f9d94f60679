# topmark:header:start
#
#   project      : TOML Maid
#   file         : __init__.py
#   file_relpath : src/tomlmaid/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""TOML Maid package.

TOML Maid sorts the keys of TOML documents block by block (runs of lines not
separated by a blank line), while reproducing comments, blank lines and value
formatting byte for byte. It exposes a CLI (``toml-maid``) and a small typed API
(`tomlmaid.api`).
"""

from __future__ import annotations

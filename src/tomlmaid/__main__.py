# topmark:header:start
#
#   project      : TOML Maid
#   file         : __main__.py
#   file_relpath : src/tomlmaid/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Module entry point for running TOML Maid via ``python -m tomlmaid``.

Equivalent to running the ``toml-maid`` console script.
"""

from __future__ import annotations

from tomlmaid.cli.main import cli

if __name__ == "__main__":
    cli()

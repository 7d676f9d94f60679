# topmark:header:start
#
#   project      : TOML Maid
#   file         : keys.py
#   file_relpath : src/tomlmaid/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Canonical key names of the ``toml-maid.toml`` configuration file.

Keys defined here are the external configuration API: renaming or removing one
is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """Top-level keys recognized in ``toml-maid.toml``."""

    # Priority keys for table bodies (root table and [sections])
    KEY_KEYS: Final[str] = "keys"
    # Priority keys for inline tables
    KEY_INLINE_KEYS: Final[str] = "inline_keys"

    KEY_SORT_ARRAYS: Final[str] = "sort-arrays"
    KEY_SORT_ARRAYS_ALIAS: Final[str] = "sort_arrays"

    # Folder-scan exclusion patterns (gitwildmatch, relative to the scanned folder)
    KEY_EXCLUDES: Final[str] = "excludes"

    @classmethod
    def known_keys(cls) -> frozenset[str]:
        """Return every key accepted at the top level of the config file."""
        return frozenset(
            {
                cls.KEY_KEYS,
                cls.KEY_INLINE_KEYS,
                cls.KEY_SORT_ARRAYS,
                cls.KEY_SORT_ARRAYS_ALIAS,
                cls.KEY_EXCLUDES,
            }
        )

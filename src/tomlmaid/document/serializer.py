# topmark:header:start
#
#   project      : TOML Maid
#   file         : serializer.py
#   file_relpath : src/tomlmaid/document/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Serialize a `Document` back to TOML text.

`tomlkit` renders its tree from the fragments it parsed, so an unmodified
document reproduces its input exactly, and a sorted one differs only by the
entries that moved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tomlmaid.document.model import Document


def serialize(document: Document) -> str:
    """Render ``document`` as TOML text (including its BOM, if any)."""
    return document.bom + document.toml.as_string()

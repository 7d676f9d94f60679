# topmark:header:start
#
#   project      : TOML Maid
#   file         : check.py
#   file_relpath : src/tomlmaid/document/check.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Text-level entry points: format a TOML string, or check that it is formatted."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tomlmaid.document.parser import parse
from tomlmaid.document.serializer import serialize
from tomlmaid.document.sorter import sort_document

if TYPE_CHECKING:
    from tomlmaid.config.model import Config
    from tomlmaid.document.model import Document


def format_text(text: str, config: Config) -> str:
    """Return ``text`` with every block sorted according to ``config``.

    Args:
        text (str): TOML source.
        config (Config): Sorting options.

    Returns:
        str: Formatted TOML; equal to ``text`` if it was already formatted.

    Raises:
        ParseError: If ``text`` is not well-formed TOML.
    """
    document: Document = parse(text)
    sort_document(document, config)
    return serialize(document)


def is_formatted(text: str, config: Config) -> bool:
    """Return True if formatting ``text`` would not change it."""
    return format_text(text, config) == text

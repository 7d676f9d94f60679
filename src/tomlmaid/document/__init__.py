# topmark:header:start
#
#   project      : TOML Maid
#   file         : __init__.py
#   file_relpath : src/tomlmaid/document/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Format-preserving TOML document core: parse, segment, sort, serialize."""

from __future__ import annotations

from tomlmaid.document.check import format_text, is_formatted
from tomlmaid.document.errors import ParseError
from tomlmaid.document.model import Document
from tomlmaid.document.parser import parse
from tomlmaid.document.segmenter import Block, segment
from tomlmaid.document.serializer import serialize
from tomlmaid.document.sorter import sort_body, sort_document

__all__ = [
    "Block",
    "Document",
    "ParseError",
    "format_text",
    "is_formatted",
    "parse",
    "segment",
    "serialize",
    "sort_body",
    "sort_document",
]

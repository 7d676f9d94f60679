# topmark:header:start
#
#   project      : TOML Maid
#   file         : parser.py
#   file_relpath : src/tomlmaid/document/parser.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Parse TOML text into a `Document`.

Parsing is done with `tomlkit`, which keeps every fragment of the input
(comments, blank lines, whitespace, quoting, literal spelling) so that
`tomlmaid.document.serializer.serialize` reproduces the input exactly.

A leading byte-order mark is removed before parsing, since `tomlkit` rejects it,
and is kept on the `Document` to be written back.

Errors are reported as `ParseError` with the location `tomlkit` reports. Errors
raised while a table is being assembled (a key defined twice) are located at the
parser's position when they occur.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.exceptions import TOMLKitError
from tomlkit.parser import Parser as TomlkitParser

from tomlmaid.config.logging import get_logger
from tomlmaid.document.errors import ParseError
from tomlmaid.document.model import Document

if TYPE_CHECKING:
    from tomlkit.toml_document import TOMLDocument

    from tomlmaid.config.logging import MaidLogger

logger: MaidLogger = get_logger(__name__)

BOM: str = "\ufeff"


def _from_tomlkit(error: TomlkitParseError) -> ParseError:
    message: str = str(error).removesuffix(f" at line {error.line} col {error.col}")
    return ParseError(message, line=error.line, column=error.col + 1)


def _position(text: str, index: int) -> tuple[int, int]:
    """Return the 1-based line and column of ``text[index]``."""
    line_start: int = text.rfind("\n", 0, index) + 1
    return text.count("\n", 0, index) + 1, index - line_start + 1


def parse(text: str) -> Document:
    """Parse ``text`` into a layout-preserving `Document`.

    Args:
        text (str): TOML source, possibly starting with a byte-order mark.

    Returns:
        Document: The parsed document.

    Raises:
        ParseError: If ``text`` is not well-formed TOML, or if its layout cannot
            be reproduced exactly.
    """
    bom: str = BOM if text.startswith(BOM) else ""
    source: str = text[len(bom) :]
    parser = TomlkitParser(source)
    try:
        toml: TOMLDocument = parser.parse()
    except TomlkitParseError as e:
        raise _from_tomlkit(e) from e
    except TOMLKitError as e:
        raise _from_tomlkit(parser.parse_error(TomlkitParseError, str(e))) from e

    rendered: str = toml.as_string()
    if rendered != source:
        # tomlkit merges an array of tables split by other tables into its first part.
        index: int = next(
            (i for i, (a, b) in enumerate(zip(rendered, source)) if a != b),
            min(len(rendered), len(source)),
        )
        line, column = _position(source, index)
        raise ParseError("document layout cannot be reproduced exactly", line=line, column=column)

    logger.trace("Parsed %d top-level entries (bom=%s)", len(toml.body), bool(bom))
    return Document(toml=toml, bom=bom)

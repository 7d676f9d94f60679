# topmark:header:start
#
#   project      : TOML Maid
#   file         : errors.py
#   file_relpath : src/tomlmaid/document/errors.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Errors raised while reading a TOML document.

A `ParseError` carries the description reported by `tomlkit` and a 1-based
``line``/``column`` location. The CLI renders it together with the file path;
the core never knows which file it is parsing.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Malformed TOML input.

    Attributes:
        message (str): Location-free description (e.g. ``"Unexpected character: '\\n'"``).
        line (int): 1-based line number of the offending character.
        column (int): 1-based column number of the offending character.
    """

    message: str
    line: int
    column: int

    def __init__(self, message: str, *, line: int, column: int) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}: {self.message}"

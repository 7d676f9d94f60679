# topmark:header:start
#
#   project      : TOML Maid
#   file         : model.py
#   file_relpath : src/tomlmaid/document/model.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Sortable views of a `tomlkit` document.

`tomlkit` keeps every byte of the input in its tree: blank lines are
`Whitespace` entries, full-line comments are `Comment` entries, and each value
keeps its indentation and same-line comment in its ``trivia``. The views in this
module copy none of that text. A `Body` only records which entries of a body
form each `Element`, and which of them travel when the element is reordered.

Table bodies (``Container.body``):
    A `Whitespace` entry is a blank line; the element after it starts a new
    block. `Comment` entries directly above a key/value travel with it, and so
    does the same-line comment kept in the value's ``trivia``. The indentation
    and the line ending stored in that ``trivia`` belong to the slot.

Inline-table bodies (``InlineTable.value.body``):
    Commas and whitespace are `Whitespace` entries and never move. Comment lines
    above a key/value and the comment after it on the same line travel with it.

Array bodies (``Array._value``):
    `tomlkit` groups array content into ``(indent, value, comma, comment)``
    groups. A value group travels with the own-line comment groups above it; the
    indentation and comma of the slot it lands in stay in place.

Element positions are indices into the body's entry list: ``head`` is the range
holding the attached comment lines and the entry itself, ``tail`` the range
holding a trailing comment (an empty range marks where one would go).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from tomlkit.items import AoT, Array, Comment, InlineTable, Item, Key, Null, Table, Whitespace

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tomlkit.container import Container
    from tomlkit.toml_document import TOMLDocument

# Alias for items in tomlkit's container bodies.
_TomlkitBodyItem = tuple[Key | None, Item]


class BodyKind(str, Enum):
    """Kind of body an element list belongs to."""

    TABLE = "table"
    INLINE_TABLE = "inline-table"
    ARRAY = "array"


@dataclass(frozen=True, slots=True)
class Element:
    """One sortable entry of a body.

    Attributes:
        head (tuple[int, int]): Entry range of the attached comment lines and the entry.
        tail (tuple[int, int]): Entry range of the same-line comment that follows the
            entry's separator; empty when there is none.
        value (Item): The entry's value (for dotted keys, the innermost one).
        name (str | None): Unquoted key, dotted parts joined with ``"."``; None for
            array items.
        starts_block (bool): True if a blank line precedes the element.
        has_comments (bool): True if a comment travels with the element.
        own_line (bool): True if the element starts its own line.
        ends_line (bool): True if a line break directly follows the element.
    """

    head: tuple[int, int]
    tail: tuple[int, int]
    value: Item
    name: str | None = None
    starts_block: bool = False
    has_comments: bool = False
    own_line: bool = False
    ends_line: bool = False


@dataclass(frozen=True, slots=True)
class Body:
    """The elements of one table, inline table or array.

    Attributes:
        kind (BodyKind): What kind of node ``node`` is.
        node (Container | InlineTable | Array): The `tomlkit` node holding the entries.
        elements (tuple[Element, ...]): Elements in body order.
    """

    kind: BodyKind
    node: Container | InlineTable | Array
    elements: tuple[Element, ...]

    @property
    def entries(self) -> list[Any]:
        """The mutable entry list the element ranges index into."""
        if isinstance(self.node, Array):
            return self.node._value  # pyright: ignore[reportPrivateUsage]
        if isinstance(self.node, InlineTable):
            return self.node.value.body
        return self.node.body


@dataclass(frozen=True, slots=True)
class Document:
    """A parsed TOML document.

    Attributes:
        toml (TOMLDocument): The `tomlkit` tree; sorting rearranges it in place.
        bom (str): Byte-order mark removed before parsing (``""`` if there was none).
    """

    toml: TOMLDocument
    bom: str = ""

    @property
    def root(self) -> Body:
        """The body of the root table."""
        return table_body(self.toml)

    def iter_bodies(self) -> Iterator[Body]:
        """Yield the root table body, then every section body in document order."""
        return iter_table_bodies(self.toml)


def _blank_line(ws: str) -> bool:
    """Return True if ``ws`` holds a line with nothing but whitespace."""
    return any(not line.strip(" \t\r") for line in ws.split("\n")[1:-1])


def _starts_line(ws: str) -> bool:
    """Return True if the text following ``ws`` is the first thing on its line."""
    return "\n" in ws and not ws.rsplit("\n", 1)[1].strip(" \t")


def _breaks_line(ws: str) -> bool:
    return ws.lstrip(" \t").startswith(("\n", "\r\n"))


def _is_dotted(key: Key | None, item: Item) -> bool:
    """Return True for the table chain `tomlkit` builds for a dotted key."""
    return key is not None and key.is_dotted() and isinstance(item, Table)


def _leaf(key: Key, item: Item) -> tuple[str, Item]:
    """Return the full name and the innermost value of a key/value entry."""
    parts: list[str] = [key.key]
    while isinstance(item, Table) and key.is_dotted():
        key, item = next((k, v) for k, v in item.value.body if k is not None)
        parts.append(key.key)
    return ".".join(parts), item


def table_body(container: Container) -> Body:
    """Describe the key/value entries of a table body.

    Sub-tables and arrays of tables that follow the key/value entries are
    not elements; their own bodies are described separately.
    """
    elements: list[Element] = []
    comments_start: int | None = None
    gap: bool = False
    for index, (key, item) in enumerate(container.body):
        if isinstance(item, Comment):
            if comments_start is None:
                comments_start = index
            continue
        if isinstance(item, Whitespace):
            gap = True
            comments_start = None
            continue
        if key is None or isinstance(item, AoT) or (isinstance(item, Table) and not key.is_dotted()):
            comments_start = None
            continue
        name, value = _leaf(key, item)
        start: int = index if comments_start is None else comments_start
        elements.append(
            Element(
                head=(start, index + 1),
                tail=(index + 1, index + 1),
                value=value,
                name=name,
                starts_block=gap,
                has_comments=start < index or bool(value.trivia.comment),
            )
        )
        comments_start = None
        gap = False
    return Body(BodyKind.TABLE, container, tuple(elements))


def _attach_tail(element: Element, entries: list[_TomlkitBodyItem], index: int) -> Element:
    """Make the comment at ``index`` (and the spaces before it) the tail of ``element``."""
    start: int = index
    previous: Item = entries[index - 1][1]
    if (
        index - 1 >= element.head[1]
        and isinstance(previous, Whitespace)
        and not previous.s.strip(" \t")
    ):
        start = index - 1
    return replace(element, tail=(start, index + 1), has_comments=True)


def _close_line(element: Element, entries: list[_TomlkitBodyItem]) -> Element:
    """Fix the tail insertion point of ``element`` and whether a line break follows it."""
    end: int = element.tail[1]
    if element.tail[0] == end:
        # No trailing comment: one would go after the separator, before the line break.
        end = element.head[1]
        while end < len(entries):
            following: Item = entries[end][1]
            if not isinstance(following, Whitespace) or "\n" in following.s:
                break
            end += 1
    following_ws: Item | None = entries[end][1] if end < len(entries) else None
    ends_line: bool = isinstance(following_ws, Whitespace) and _breaks_line(following_ws.s)
    if element.tail[0] == element.tail[1]:
        return replace(element, tail=(end, end), ends_line=ends_line)
    return replace(element, ends_line=ends_line)


def inline_table_body(table: InlineTable) -> Body:
    """Describe the key/value entries of an inline table."""
    entries: list[_TomlkitBodyItem] = table.value.body
    elements: list[Element] = []
    run: str = ""  # whitespace and commas since the last comment or entry
    lead: str = ""  # whitespace before the first attached comment line
    comments_start: int | None = None
    gap: bool = False
    line_open: bool = False
    for index, (key, item) in enumerate(entries):
        if isinstance(item, Whitespace):
            run += item.s
            continue
        if _blank_line(run):
            gap = True
            comments_start = None
        if "\n" in run:
            line_open = False
        if isinstance(item, Comment):
            if line_open:
                elements[-1] = _attach_tail(elements[-1], entries, index)
            elif _starts_line(run):
                if comments_start is None:
                    comments_start, lead = index, run
            else:
                comments_start = None
            line_open = False
            run = ""
            continue
        assert key is not None
        name, value = _leaf(key, item)
        start: int = index if comments_start is None else comments_start
        elements.append(
            Element(
                head=(start, index + 1),
                tail=(index + 1, index + 1),
                value=value,
                name=name,
                starts_block=gap,
                has_comments=start < index,
                own_line=_starts_line(run if comments_start is None else lead),
            )
        )
        comments_start = None
        gap = False
        line_open = True
        run = ""
    return Body(
        BodyKind.INLINE_TABLE,
        table,
        tuple(_close_line(element, entries) for element in elements),
    )


def array_body(array: Array) -> Body:
    """Describe the items of an array."""
    groups: list[Any] = array._value  # pyright: ignore[reportPrivateUsage]
    elements: list[Element] = []
    comments_start: int | None = None
    gap: bool = False
    for index, group in enumerate(groups):
        indent: str = group.indent.s if group.indent is not None else ""
        if _blank_line(indent):
            gap = True
            comments_start = None
        value: Item | None = group.value
        if value is None or isinstance(value, Null):
            if group.comment is not None and _starts_line(indent):
                if comments_start is None:
                    comments_start = index
            else:
                comments_start = None
            continue
        start: int = index if comments_start is None else comments_start
        first_indent: Whitespace | None = groups[start].indent
        following: Whitespace | None = groups[index + 1].indent if index + 1 < len(groups) else None
        elements.append(
            Element(
                head=(start, index + 1),
                tail=(index + 1, index + 1),
                value=value,
                starts_block=gap,
                has_comments=start < index or group.comment is not None,
                own_line=first_indent is not None and _starts_line(first_indent.s),
                ends_line=following is not None and _breaks_line(following.s),
            )
        )
        comments_start = None
        gap = False
    return Body(BodyKind.ARRAY, array, tuple(elements))


def value_body(value: Item) -> Body | None:
    """Return the body of an array or inline-table value, None for anything else."""
    if isinstance(value, Array):
        return array_body(value)
    if isinstance(value, InlineTable):
        return inline_table_body(value)
    return None


def iter_table_bodies(container: Container) -> Iterator[Body]:
    """Yield the body of ``container``, then those of its sub-tables in document order."""
    yield table_body(container)
    for key, item in container.body:
        if isinstance(item, AoT):
            for table in item.body:
                yield from iter_table_bodies(table.value)
        elif isinstance(item, Table) and not _is_dotted(key, item):
            yield from iter_table_bodies(item.value)

# topmark:header:start
#
#   project      : TOML Maid
#   file         : sorter.py
#   file_relpath : src/tomlmaid/document/sorter.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Key priority resolver and block sorter.

`sort_body` is a single recursive procedure for every body kind:

* table bodies (root table and ``[sections]``) are key-sorted using
  ``Config.keys`` as the priority list;
* inline-table bodies are key-sorted using ``Config.inline_keys``;
* array bodies are value-sorted when ``Config.sort_arrays`` is enabled and every
  item is a scalar.

Sorting happens within each block only. Priority keys come first in priority
order; the remaining keys follow by codepoint order. Python's `sorted` is stable.

Moving an element splices the `tomlkit` entries of its body in place: the
entries that travel (attached comment lines, the entry, a trailing comment)
land in the slot of the element they replace, while blank lines, commas and
whitespace between slots stay put. The indentation and line ending of a table
entry live in its value's trivia, and the indentation and comma of an array item
live in its group; both are handed over to the element that takes the slot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tomlkit.items import Array, InlineTable, String

from tomlmaid.config.logging import get_logger
from tomlmaid.document.model import BodyKind, value_body
from tomlmaid.document.segmenter import segment

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from tomlkit.items import Item

    from tomlmaid.config.logging import MaidLogger
    from tomlmaid.config.model import Config
    from tomlmaid.document.model import Body, Document, Element

logger: MaidLogger = get_logger(__name__)

SortKey = tuple[int, int, str]


def _key_sort_key(ranks: Mapping[str, int]) -> Callable[[Element], SortKey]:
    def sort_key(element: Element) -> SortKey:
        name: str = element.name or ""
        rank: int | None = ranks.get(name)
        if rank is not None:
            return (0, rank, "")
        return (1, 0, name)

    return sort_key


def _value_sort_key(element: Element) -> SortKey:
    value: Item = element.value
    if isinstance(value, String):
        return (0, 0, value.unwrap())
    return (1, 0, value.as_string())


def _is_scalar(value: Item) -> bool:
    return not isinstance(value, (Array, InlineTable))


def _can_reorder(members: Sequence[Element]) -> bool:
    """Return True if the members of an array/inline-table block may move.

    Comments travel with their element, so a block carrying comments is only
    reordered when each member sits on its own line and is followed by a line
    break; otherwise a moved comment could swallow the content after it.
    """
    if not any(element.has_comments for element in members):
        return True
    return all(element.own_line and element.ends_line for element in members)


def _split_eol(trail: str) -> tuple[str, str]:
    """Split a trivia trail into its trailing spaces and its line ending."""
    if trail.endswith("\r\n"):
        return trail[:-2], "\r\n"
    if trail.endswith("\n"):
        return trail[:-1], "\n"
    return trail, ""


def _move(body: Body, members: Sequence[Element], ordered: Sequence[Element]) -> None:
    """Put ``ordered[i]`` in the slot of ``members[i]`` for every member of a block."""
    entries = body.entries
    if body.kind == BodyKind.TABLE:
        layout: list[tuple[str, str]] = [
            (slot.value.trivia.indent, _split_eol(slot.value.trivia.trail)[1]) for slot in members
        ]
        for (indent, eol), moved in zip(layout, ordered):
            trivia = moved.value.trivia
            trivia.indent = indent
            trivia.trail = _split_eol(trivia.trail)[0] + eol
    elif body.kind == BodyKind.ARRAY:
        groups = [(entries[slot.head[0]].indent, entries[slot.head[1] - 1].comma) for slot in members]
        for (indent, comma), moved in zip(groups, ordered):
            entries[moved.head[0]].indent = indent
            entries[moved.head[1] - 1].comma = comma

    start: int = members[0].head[0]
    end: int = members[-1].tail[1]
    position: int = start
    rebuilt: list[object] = []
    for slot, moved in zip(members, ordered):
        rebuilt += entries[position : slot.head[0]]
        rebuilt += entries[moved.head[0] : moved.head[1]]
        rebuilt += entries[slot.head[1] : slot.tail[0]]
        rebuilt += entries[moved.tail[0] : moved.tail[1]]
        position = slot.tail[1]
    entries[start:end] = rebuilt


def sort_body(body: Body, config: Config) -> bool:
    """Sort every block of ``body`` and, recursively, every nested value, in place.

    Args:
        body (Body): The body to sort.
        config (Config): Sorting options.

    Returns:
        bool: True if any entry moved.
    """
    changed: bool = False
    for element in body.elements:
        nested: Body | None = value_body(element.value)
        if nested is not None and sort_body(nested, config):
            changed = True

    sort_key: Callable[[Element], SortKey] | None
    if body.kind == BodyKind.TABLE:
        sort_key = _key_sort_key(config.key_ranks)
    elif body.kind == BodyKind.INLINE_TABLE:
        sort_key = _key_sort_key(config.inline_key_ranks)
    elif config.sort_arrays and all(_is_scalar(e.value) for e in body.elements):
        sort_key = _value_sort_key
    else:
        sort_key = None
    if sort_key is None:
        return changed

    for block in segment(body):
        if len(block) < 2:
            continue
        members: list[Element] = [body.elements[i] for i in block.indices]
        if body.kind != BodyKind.TABLE and not _can_reorder(members):
            logger.trace("Keeping %s block %s in place (comments)", body.kind.value, block)
            continue
        ordered: list[Element] = sorted(members, key=sort_key)
        if all(a is b for a, b in zip(members, ordered)):
            continue
        _move(body, members, ordered)
        changed = True
    return changed


def sort_document(document: Document, config: Config) -> bool:
    """Sort the root table and every section body in place; section order is kept.

    Args:
        document (Document): Parsed document.
        config (Config): Sorting options.

    Returns:
        bool: True if the document changed.
    """
    changed: bool = False
    for body in document.iter_bodies():
        if sort_body(body, config):
            changed = True
    if changed:
        logger.debug("Document changed by sorting")
    return changed

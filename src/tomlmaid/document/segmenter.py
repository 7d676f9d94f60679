# topmark:header:start
#
#   project      : TOML Maid
#   file         : segmenter.py
#   file_relpath : src/tomlmaid/document/segmenter.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Block segmentation.

A block is a maximal run of consecutive elements of one body with no blank line
between them. The element right after a blank line has ``starts_block`` set, so
block boundaries are exactly those elements.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tomlmaid.document.model import Body, Element


@dataclass(frozen=True, slots=True)
class Block:
    """Indices of the elements forming one block, in body order."""

    indices: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.indices)


def segment_elements(elements: Sequence[Element]) -> list[Block]:
    """Split an element sequence into blocks.

    Args:
        elements (Sequence[Element]): Elements of a single body.

    Returns:
        list[Block]: Blocks in body order; empty if there are no elements.
    """
    blocks: list[Block] = []
    current: list[int] = []
    for index, element in enumerate(elements):
        if current and element.starts_block:
            blocks.append(Block(tuple(current)))
            current = []
        current.append(index)
    if current:
        blocks.append(Block(tuple(current)))
    return blocks


def segment(body: Body) -> list[Block]:
    """Return the blocks of ``body``."""
    return segment_elements(body.elements)

# topmark:header:start
#
#   project      : TOML Maid
#   file         : test_segmenter.py
#   file_relpath : tests/document/test_segmenter.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Tests for block segmentation."""

from __future__ import annotations

from tomlkit.items import Array

from tests.conftest import parametrize
from tomlmaid.document import Block, parse, segment
from tomlmaid.document.model import array_body


@parametrize(
    "text, expected",
    [
        ("", []),
        ("a = 1\n", [(0,)]),
        ("a = 1\nb = 2\n", [(0, 1)]),
        ("a = 1\n\nb = 2\nc = 3\n", [(0,), (1, 2)]),
        ("\n\na = 1\n", [(0,)]),
        ("a = 1\n# c\n\n# d\nb = 2\n", [(0,), (1,)]),
        ("a = 1\n# c\nb = 2\n", [(0, 1)]),
    ],
)
def test_segment_table_body(text: str, expected: list[tuple[int, ...]]) -> None:
    blocks: list[Block] = segment(parse(text).root)
    assert [b.indices for b in blocks] == expected


def test_segment_array_body() -> None:
    value = parse("a = [\n  1,\n  2,\n\n  3,\n]\n").root.elements[0].value
    assert isinstance(value, Array)

    blocks = segment(array_body(value))

    assert [len(b) for b in blocks] == [2, 1]
    assert blocks[1].indices == (2,)

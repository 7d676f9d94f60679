# topmark:header:start
#
#   project      : TOML Maid
#   file         : test_sorter.py
#   file_relpath : tests/document/test_sorter.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Tests for block sorting: priority keys, stability, comment adhesion and arrays."""

from __future__ import annotations

from typing import Any

import pytest

from tests.conftest import make_config, parametrize
from tomlmaid.document import ParseError, format_text, parse, serialize, sort_body, sort_document


def fmt(text: str, **overrides: Any) -> str:
    return format_text(text, make_config(**overrides))


def test_sorts_single_block() -> None:
    assert fmt("b = 1\na = 2\n") == "a = 2\nb = 1\n"


def test_blank_line_splits_blocks() -> None:
    source = "c = 3\na = 1\n\nb = 2\n"
    assert fmt(source) == "a = 1\nc = 3\n\nb = 2\n"


def test_whitespace_only_line_splits_blocks() -> None:
    source = "b = 1\n   \na = 2\n"
    assert fmt(source) == source


def test_priority_keys_first_then_lexicographic() -> None:
    source = 'name = "x"\nedition = "2021"\nversion = "1"\n'
    expected = 'version = "1"\nname = "x"\nedition = "2021"\n'
    assert fmt(source, keys=["version", "name"]) == expected


def test_first_occurrence_of_priority_key_wins() -> None:
    config = make_config(keys=["b", "a", "b"])
    assert dict(config.key_ranks) == {"b": 0, "a": 1}
    assert format_text("a = 1\nb = 2\n", config) == "b = 2\na = 1\n"


def test_duplicate_keys_are_rejected() -> None:
    with pytest.raises(ParseError):
        fmt("b = 1\na = 1\nb = 2\n")


@parametrize(
    "source, expected",
    [
        ('b = 1\nB = 2\n_ = 3\n"a" = 4\n', 'B = 2\n_ = 3\n"a" = 4\nb = 1\n'),
        ("b.a = 1\na.b = 2\n", "a.b = 2\nb.a = 1\n"),
        ("\"b\" = 1\n'a' = 2\n", "'a' = 2\n\"b\" = 1\n"),
    ],
)
def test_keys_compare_by_unquoted_codepoints(source: str, expected: str) -> None:
    assert fmt(source) == expected


def test_comment_lines_and_suffix_move_with_entry() -> None:
    source = "# about b\nb = 1 # b\na = 2\n"
    assert fmt(source) == "a = 2\n# about b\nb = 1 # b\n"


def test_comment_after_blank_line_sticks_to_following_entry() -> None:
    source = "x = 0\n\n# header comment\nb = 1\na = 2\n"
    assert fmt(source) == "x = 0\n\na = 2\n# header comment\nb = 1\n"


def test_trailing_comment_of_table_stays_in_place() -> None:
    assert fmt("b = 1\na = 2\n# end\n") == "a = 2\nb = 1\n# end\n"


def test_line_endings_stay_with_their_slot() -> None:
    assert fmt("b = 1\r\na = 2\r\n") == "a = 2\r\nb = 1\r\n"
    assert fmt("b = 1\na = 2") == "a = 2\nb = 1"


def test_sections_sorted_but_not_reordered() -> None:
    source = "z = 1\ny = 2\n[b]\ny = 1\nx = 2\n[a]\nz = 1\n"
    expected = "y = 2\nz = 1\n[b]\nx = 2\ny = 1\n[a]\nz = 1\n"
    assert fmt(source) == expected


def test_inline_table_sorted_with_inline_keys() -> None:
    assert fmt("d = { b = 1, a = 2 }\n") == "d = { a = 2, b = 1 }\n"

    source = 'd = { features = ["x"], version = "1" }\n'
    expected = 'd = { version = "1", features = ["x"] }\n'
    assert fmt(source, inline_keys=["version"]) == expected


def test_table_keys_do_not_apply_to_inline_tables() -> None:
    source = "b = 0\na = 0\nd = { b = 1, a = 2 }\n"
    expected = "b = 0\na = 0\nd = { a = 2, b = 1 }\n"
    assert fmt(source, keys=["b"]) == expected


def test_multiline_inline_table_keeps_commas_in_place() -> None:
    source = "t = {\n  c = 1,\n  a = 2\n}\n"
    assert fmt(source) == "t = {\n  a = 2,\n  c = 1\n}\n"


def test_arrays_untouched_by_default() -> None:
    source = 'a = ["b", "a"]\nb = [\n  3,\n  1,\n\n  2,\n]\n'
    assert fmt(source) == source


def test_sort_arrays_orders_scalars() -> None:
    assert fmt('a = ["b", "a"]\n', sort_arrays=True) == 'a = ["a", "b"]\n'


def test_sort_arrays_puts_strings_before_other_scalars() -> None:
    assert fmt('a = [3, "b", 1, "a"]\n', sort_arrays=True) == 'a = ["a", "b", 1, 3]\n'


def test_sort_arrays_respects_blocks_and_trailing_commas() -> None:
    source = 'a = [\n  "d",\n  "c",\n\n  "b",\n  "a"\n]\n'
    expected = 'a = [\n  "c",\n  "d",\n\n  "a",\n  "b"\n]\n'
    assert fmt(source, sort_arrays=True) == expected


def test_sort_arrays_skips_arrays_of_containers() -> None:
    source = "a = [[2, 1], [1]]\n"
    assert fmt(source) == source
    assert fmt(source, sort_arrays=True) == "a = [[1, 2], [1]]\n"


def test_array_comments_move_when_each_item_has_its_own_line() -> None:
    source = 'a = [\n  "c", # cee\n  "b",\n]\n'
    expected = 'a = [\n  "b",\n  "c", # cee\n]\n'
    assert fmt(source, sort_arrays=True) == expected


def test_array_with_shared_comment_line_is_kept() -> None:
    source = 'a = ["c", # cee\n  "b"]\n'
    assert fmt(source, sort_arrays=True) == source


def test_inline_tables_nested_in_arrays_are_sorted() -> None:
    assert fmt("a = [{ b = 1, a = 2 }]\n") == "a = [{ a = 2, b = 1 }]\n"




def test_inline_table_comments_move_when_each_entry_has_its_own_line() -> None:
    source = "t = {\n  c = 1, # cee\n  # about b\n  b = 2,\n}\n"
    expected = "t = {\n  # about b\n  b = 2,\n  c = 1, # cee\n}\n"
    assert fmt(source) == expected


def test_inline_table_with_shared_comment_line_is_kept() -> None:
    source = "t = { c = 1, # cee\n  b = 2 }\n"
    assert fmt(source) == source


def test_dotted_keys_move_with_their_comments() -> None:
    source = "[tool]\n# z settings\nz.mode = 1\na.b.c = 2 # deep\n"
    expected = "[tool]\na.b.c = 2 # deep\n# z settings\nz.mode = 1\n"
    assert fmt(source) == expected


MANIFEST: str = (
    "# top\n"
    "\n"
    "[dependencies]\n"
    "# web\n"
    "b = 1  # trailing\n"
    "a = 'x'\n"
    "\n"
    "z = [\n"
    '  "b", # bee\n'
    '  "a",\n'
    "]\r\n"
    "t = { y = 1,  x = 0x10 }\n"
)


def test_manifest_keeps_every_fragment_of_moved_entries() -> None:
    expected = (
        "# top\n"
        "\n"
        "[dependencies]\n"
        "a = 'x'\n"
        "# web\n"
        "b = 1  # trailing\n"
        "\n"
        "t = { x = 0x10,  y = 1 }\r\n"
        "z = [\n"
        '  "b", # bee\n'
        '  "a",\n'
        "]\n"
    )
    assert fmt(MANIFEST) == expected


def test_manifest_array_sorting_carries_item_comment() -> None:
    formatted = fmt(MANIFEST, sort_arrays=True)
    assert 'z = [\n  "a",\n  "b", # bee\n]\n' in formatted


def test_sort_document_reports_changes() -> None:
    config = make_config(sort_arrays=True)
    text = "a = 1\nb = { x = 1, y = [1, 2] }\n[s]\nc = 1\n"
    doc = parse(text)

    assert not sort_document(doc, config)
    assert serialize(doc) == text

    unsorted = parse("b = 1\na = 2\n[s]\nc = [2, 1]\n")
    assert sort_document(unsorted, config)
    assert serialize(unsorted) == "a = 2\nb = 1\n[s]\nc = [1, 2]\n"


def test_sort_body_rearranges_entries_in_place() -> None:
    doc = parse("b = 1\na = 2\n")

    assert sort_body(doc.root, make_config())
    assert [e.name for e in doc.root.elements] == ["a", "b"]
    assert serialize(doc) == "a = 2\nb = 1\n"

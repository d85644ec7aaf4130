from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from word_inflection.buffer import TextBuffer
from word_inflection.editor import (
    Selection,
    TextEdit,
    collect_edits,
    find_next_word_start,
    has_letter,
    is_valid_word_position,
    iter_words,
    merge_ranges,
    selection_ranges,
    transform_selection,
    transform_word_part,
    transform_words,
    word_range_at,
)
from word_inflection.naming import (
    capitalize,
    downcase,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    upcase,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def cursors(*offsets: int) -> list[Selection]:
    return [Selection.cursor(offset) for offset in offsets]


def test_iter_words() -> None:
    text = "foo bar-baz.qux_1 (42)"
    assert list(iter_words(text)) == [(0, 3), (4, 11), (12, 17), (19, 21)]
    assert list(iter_words(text, 5)) == [(5, 11), (12, 17), (19, 21)]


def test_iter_words_scans_are_independent() -> None:
    text = "a b c"
    first = iter_words(text)
    second = iter_words(text, 2)
    assert next(first) == (0, 1)
    assert next(second) == (2, 3)
    assert next(first) == (2, 3)
    assert next(second) == (4, 5)


@pytest.mark.parametrize(
    ("text", "offset", "expected"),
    [
        ("fooBar baz", 0, (0, 6)),
        ("fooBar baz", 6, (0, 6)),
        ("fooBar baz", 7, (7, 10)),
        ("fooBar baz", 10, (7, 10)),
        ("foo  bar", 4, None),
        ("", 0, None),
    ],
)
def test_word_range_at(
    text: str, offset: int, expected: tuple[int, int] | None
) -> None:
    assert word_range_at(text, offset) == expected


@pytest.mark.parametrize(
    ("text", "offset", "expected"),
    [
        ("fooBar", 0, True),
        ("fooBar", 3, True),
        ("fooBar", 6, False),
        ("  fooBar", 0, False),
        ("1234 fooBar", 0, False),
        ("日本語", 1, True),
    ],
)
def test_is_valid_word_position(
    text: str, offset: int, expected: bool
) -> None:
    assert is_valid_word_position(text, offset) is expected


@pytest.mark.parametrize(
    ("text", "offset", "expected"),
    [
        ("  fooBar", 0, 2),
        ("1234 fooBar", 0, 5),
        ("!!!\nfooBar", 0, 4),
        ("Foo barBaz", 3, 4),
        ("!!!", 0, None),
        ("foo 42", 3, None),
    ],
)
def test_find_next_word_start(
    text: str, offset: int, expected: int | None
) -> None:
    assert find_next_word_start(text, offset) == expected


def test_has_letter() -> None:
    assert has_letter("a1")
    assert has_letter("日")
    assert not has_letter("1234")
    assert not has_letter("_-")
    assert not has_letter("")


@pytest.mark.parametrize(
    ("text", "transform", "expected"),
    [
        ("foo bar-baz.qux", capitalize, "Foo Bar-baz.Qux"),
        ("foo_bar baz-qux", upcase, "FOO_BAR BAZ-QUX"),
        ("FOO BAR\nBaz-Qux", downcase, "foo bar\nbaz-qux"),
        ("1234 fooBar", upcase, "1234 FOOBAR"),
        ("fooBar = bazQux(42)", to_snake_case, "foo_bar = baz_qux(42)"),
        ("", upcase, ""),
    ],
)
def test_transform_words(
    text: str, transform: Callable[[str], str], expected: str
) -> None:
    assert transform_words(text, transform) == expected


def test_collect_edits_skips_empty_and_unchanged_selections() -> None:
    text = "foo BAR baz"
    selections = [Selection(0, 3), Selection.cursor(4), Selection(7, 4)]
    assert collect_edits(text, selections, upcase) == [
        TextEdit(0, 3, "FOO")
    ]


def test_selection_ranges_expand_cursors_to_words() -> None:
    text = "fooBar  baz"
    selections = [Selection(9, 11), Selection.cursor(2), Selection.cursor(7)]
    assert selection_ranges(text, selections) == [
        Selection(9, 11),
        Selection(0, 6),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("text", "selections", "transform", "expected"),
    [
        ("fooBar bazQux", cursors(1), to_snake_case, "foo_bar bazQux"),
        ("fooBar bazQux", cursors(6), to_snake_case, "foo_bar bazQux"),
        (
            "fooBar bazQux",
            [Selection(0, 13)],
            to_kebab_case,
            "foo-bar baz-qux",
        ),
        (
            "fooBar bazQux",
            cursors(0, 10),
            to_kebab_case,
            "foo-bar baz-qux",
        ),
    ],
)
async def test_transform_selection(
    text: str,
    selections: list[Selection],
    transform: Callable[[str], str],
    expected: str,
) -> None:
    buffer = TextBuffer(text, selections)
    assert await transform_selection(buffer, transform)
    assert buffer.text == expected


@pytest.mark.asyncio
async def test_transform_selection_without_word_is_a_no_op() -> None:
    buffer = TextBuffer("foo   bar", cursors(4))
    assert not await transform_selection(buffer, upcase)
    assert buffer.text == "foo   bar"
    assert buffer.selections == (Selection.cursor(4),)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("text", "selections", "transform", "expected", "expected_selections"),
    [
        # every word inside a selection
        (
            "foo bar-baz.qux",
            [Selection(0, 15)],
            capitalize,
            "Foo Bar-baz.Qux",
            [Selection(0, 15)],
        ),
        (
            "foo_bar baz-qux",
            [Selection(0, 15)],
            upcase,
            "FOO_BAR BAZ-QUX",
            [Selection(0, 15)],
        ),
        (
            "FOO BAR\nBaz-Qux",
            [Selection(0, 15)],
            downcase,
            "foo bar\nbaz-qux",
            [Selection(0, 15)],
        ),
        # cursor off a word moves to the next word part
        ("  fooBar", cursors(0), upcase, "  FOOBar", cursors(5)),
        ("Foo barBaz", cursors(3), upcase, "Foo BARBaz", cursors(7)),
        (".fooBar", cursors(0), upcase, ".FOOBar", cursors(4)),
        ("\nFooBar", cursors(0), upcase, "\nFOOBar", cursors(4)),
        ("!!!\nfooBar", cursors(0), capitalize, "!!!\nFooBar", cursors(7)),
        ("1234 fooBar", cursors(0), upcase, "1234 FOOBar", cursors(8)),
        # cursor on a word
        ("fooBar", cursors(0), capitalize, "FooBar", cursors(3)),
        ("fooBarBaz", cursors(3), upcase, "fooBARBaz", cursors(6)),
        ("naïveTest", cursors(0), upcase, "NAÏVETest", cursors(5)),
        ("日本語Test", cursors(0), upcase, "日本語TEST", cursors(7)),
        (
            "İstanbulTest",
            cursors(0),
            downcase,
            "i\u0307stanbulTest",
            cursors(9),
        ),
        ("ábcDef", cursors(0), capitalize, "ÁbcDef", cursors(3)),
        ("ÄBCDef", cursors(0), downcase, "äbcDef", cursors(3)),
        # several cursors
        (
            "fooBar bazQux",
            cursors(0, 7),
            upcase,
            "FOOBar BAZQux",
            cursors(3, 10),
        ),
        (
            "  fooBar   bazQux",
            cursors(0, 9),
            capitalize,
            "  FooBar   BazQux",
            cursors(5, 14),
        ),
        # selections win over cursors
        (
            "fooBar bazQux",
            [Selection(0, 6), Selection.cursor(7)],
            upcase,
            "FOOBAR bazQux",
            [Selection(0, 6), Selection.cursor(7)],
        ),
    ],
)
async def test_transform_word_part(
    text: str,
    selections: list[Selection],
    transform: Callable[[str], str],
    expected: str,
    expected_selections: list[Selection],
) -> None:
    buffer = TextBuffer(text, selections)
    await transform_word_part(buffer, transform)
    assert buffer.text == expected
    assert buffer.selections == tuple(expected_selections)


@pytest.mark.asyncio
async def test_transform_word_part_without_next_word_keeps_cursor() -> None:
    buffer = TextBuffer("!!!", cursors(0))
    assert not await transform_word_part(buffer, upcase)
    assert buffer.text == "!!!"
    assert buffer.selections == (Selection.cursor(0),)


@pytest.mark.asyncio
async def test_transform_word_part_moves_on_after_word_end() -> None:
    buffer = TextBuffer("hello world", cursors(0))
    await transform_word_part(buffer, upcase)
    await transform_word_part(buffer, upcase)
    assert buffer.text == "HELLO WORLD"
    assert buffer.selections == (Selection.cursor(11),)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("foo_bar", "Foo_Bar"),
        ("foo-bar", "Foo-Bar"),
        ("foo__bar", "Foo__Bar"),
    ],
)
async def test_transform_word_part_steps_over_separators(
    text: str, expected: str
) -> None:
    buffer = TextBuffer(text, cursors(0))
    assert await transform_word_part(buffer, capitalize)
    assert await transform_word_part(buffer, capitalize)
    assert buffer.text == expected
    assert buffer.selections == (Selection.cursor(len(text)),)


def test_merge_ranges() -> None:
    selections = [
        Selection(4, 7),
        Selection.cursor(2),
        Selection(1, 3),
        Selection(3, 0),
        Selection(8, 9),
        Selection(7, 8),
    ]
    assert merge_ranges(selections) == [(0, 3), (4, 7), (7, 8), (8, 9)]


@pytest.mark.asyncio
async def test_cursors_in_one_word_share_an_edit() -> None:
    buffer = TextBuffer("foo_bar baz", cursors(1, 5))
    assert await transform_selection(buffer, to_pascal_case)
    assert buffer.text == "FooBar baz"
    assert buffer.selections == (Selection.cursor(6), Selection.cursor(6))


@pytest.mark.asyncio
async def test_cursors_in_one_word_part_share_an_edit() -> None:
    buffer = TextBuffer("fooBar", cursors(0, 1))
    assert await transform_word_part(buffer, upcase)
    assert buffer.text == "FOOBar"
    assert buffer.selections == (Selection.cursor(3), Selection.cursor(3))


class RecordingHost(TextBuffer):
    """Buffer that records the order of host calls."""

    def __init__(self, text: str, selections: list[Selection]) -> None:
        super().__init__(text, selections)
        self.calls: list[str] = []

    async def apply_edits(self, edits: Sequence[TextEdit]) -> bool:
        self.calls.append("apply_edits")
        return await super().apply_edits(edits)

    async def select_word_part_right(self) -> None:
        self.calls.append("select_word_part_right")
        await super().select_word_part_right()


@pytest.mark.asyncio
async def test_word_part_host_calls_are_sequential_and_batched() -> None:
    host = RecordingHost("fooBar bazQux", cursors(0, 7))
    assert await transform_word_part(host, upcase)
    assert host.calls == ["select_word_part_right", "apply_edits"]

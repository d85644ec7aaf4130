"""Maps an editing host's selections onto the style engine.

The host owns the buffer; everything here reads its text and selections,
computes edits, and hands them back in one batch.  Host calls are awaited
one at a time so that selections are re-read only after the host has
settled.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias

from .naming import SEPARATORS, is_digit, is_letter

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)

Transform: TypeAlias = Callable[[str], str]
TextRange: TypeAlias = tuple[int, int]


@dataclass(frozen=True)
class Selection:
    anchor: int
    active: int

    @classmethod
    def cursor(cls, offset: int) -> Selection:
        return cls(offset, offset)

    @property
    def start(self) -> int:
        return min(self.anchor, self.active)

    @property
    def end(self) -> int:
        return max(self.anchor, self.active)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.active

    def collapsed(self) -> Selection:
        return Selection.cursor(self.active)


@dataclass(frozen=True)
class TextEdit:
    start: int
    end: int
    new_text: str


class EditorHost(Protocol):
    selections: tuple[Selection, ...]

    @property
    def text(self) -> str: ...

    async def apply_edits(self, edits: Sequence[TextEdit]) -> bool:
        """Replace every range at once; offsets refer to the old text."""
        ...

    async def select_word_part_right(self) -> None:
        """Extend every selection to the end of the next word part."""
        ...


def is_word_char(char: str) -> bool:
    return char in SEPARATORS or is_letter(char) or is_digit(char)


def has_letter(text: str) -> bool:
    return any(is_letter(char) for char in text)


def iter_words(text: str, start: int = 0) -> Iterator[TextRange]:
    """Yield the ranges of word runs in text, scanning from start."""
    offset: int | None = None
    for i in range(start, len(text)):
        if is_word_char(text[i]):
            if offset is None:
                offset = i
        elif offset is not None:
            yield offset, i
            offset = None
    if offset is not None:
        yield offset, len(text)


def word_range_at(text: str, offset: int) -> TextRange | None:
    start = end = offset
    while start > 0 and is_word_char(text[start - 1]):
        start -= 1
    while end < len(text) and is_word_char(text[end]):
        end += 1
    return (start, end) if start != end else None


def is_valid_word_position(text: str, offset: int) -> bool:
    word = word_range_at(text, offset)
    if word is None or offset == word[1]:
        return False
    return has_letter(text[word[0] : word[1]])


def find_next_word_start(text: str, offset: int) -> int | None:
    for start, end in iter_words(text, offset):
        if has_letter(text[start:end]):
            return start
    return None


def transform_words(text: str, transform: Transform) -> str:
    """Apply transform to every word that has a letter, in place."""
    pieces: list[str] = []
    last = 0
    for start, end in iter_words(text):
        word = text[start:end]
        pieces.append(text[last:start])
        pieces.append(transform(word) if has_letter(word) else word)
        last = end
    pieces.append(text[last:])
    return "".join(pieces)


def merge_ranges(selections: Iterable[Selection]) -> list[TextRange]:
    """Sort the non-empty selections and join the ones that overlap."""
    merged: list[TextRange] = []
    for selection in sorted(
        selections, key=lambda selection: (selection.start, selection.end)
    ):
        if selection.is_empty:
            continue
        if merged and selection.start < merged[-1][1]:
            start, end = merged[-1]
            merged[-1] = (start, max(end, selection.end))
        else:
            merged.append((selection.start, selection.end))
    return merged


def collect_edits(
    text: str, selections: Iterable[Selection], transform: Transform
) -> list[TextEdit]:
    edits: list[TextEdit] = []
    for start, end in merge_ranges(selections):
        old_text = text[start:end]
        new_text = transform(old_text)
        if new_text != old_text:
            edits.append(TextEdit(start, end, new_text))
    return edits


async def apply_edits(host: EditorHost, edits: Sequence[TextEdit]) -> bool:
    if not edits:
        logger.debug("Nothing to change")
        return False
    logger.debug(f"Applying {len(edits)} edit(s)")
    return await host.apply_edits(edits)


def selection_ranges(
    text: str, selections: Iterable[Selection]
) -> list[Selection]:
    """Use non-empty selections as-is and expand cursors to their word."""
    ranges: list[Selection] = []
    for selection in selections:
        if not selection.is_empty:
            ranges.append(selection)
        elif (word := word_range_at(text, selection.active)) is not None:
            ranges.append(Selection(*word))
        else:
            logger.debug(f"No word at offset {selection.active}")
    return ranges


async def transform_selection(host: EditorHost, transform: Transform) -> bool:
    text = host.text
    ranges = selection_ranges(text, host.selections)
    return await apply_edits(host, collect_edits(text, ranges, transform))


def _move_to_next_word(text: str, selection: Selection) -> Selection:
    if is_valid_word_position(text, selection.active):
        return selection
    next_start = find_next_word_start(text, selection.active)
    if next_start is None:
        logger.debug(f"No word after offset {selection.active}")
        return selection
    return Selection.cursor(next_start)


async def transform_word_part(host: EditorHost, transform: Transform) -> bool:
    """Transform the word part at or after each cursor.

    With any non-empty selection, every word inside the selections is
    transformed instead and the selections are kept.  Otherwise cursors that
    are not on a word with letters first move to the next such word, the
    host selects the word part to the right, and each cursor ends up after
    its transformed part.
    """
    if any(not selection.is_empty for selection in host.selections):
        return await apply_edits(
            host,
            collect_edits(
                host.text,
                host.selections,
                lambda part: transform_words(part, transform),
            ),
        )

    text = host.text
    if not all(
        is_valid_word_position(text, selection.active)
        for selection in host.selections
    ):
        host.selections = tuple(
            _move_to_next_word(text, selection)
            for selection in host.selections
        )
        if not any(
            is_valid_word_position(text, selection.active)
            for selection in host.selections
        ):
            logger.debug("No word part to transform")
            return False

    await host.select_word_part_right()
    applied = await apply_edits(
        host,
        collect_edits(
            host.text,
            host.selections,
            lambda part: transform(part) if has_letter(part) else part,
        ),
    )
    host.selections = tuple(
        selection.collapsed() for selection in host.selections
    )
    return applied

from __future__ import annotations

from typing import TYPE_CHECKING

from .editor import Selection, TextEdit, is_word_char
from .naming import SEPARATORS, category, is_upper

if TYPE_CHECKING:
    from collections.abc import Sequence


class OverlappingEditsError(ValueError):
    def __init__(self, first: TextEdit, second: TextEdit) -> None:
        super().__init__(f"Edits overlap: {first} and {second}")
        self.first = first
        self.second = second


def _is_word_part_char(char: str) -> bool:
    return is_word_char(char) and char not in SEPARATORS


def _is_word_part_boundary(text: str, offset: int) -> bool:
    if not is_upper(text[offset]):
        return False
    previous = category(text[offset - 1])
    if previous in ("Ll", "Nd"):
        return True
    # XMLParser: the part ends before the P
    return (
        previous == "Lu"
        and offset + 1 < len(text)
        and category(text[offset + 1]) == "Ll"
    )


def next_word_part_end(text: str, offset: int) -> int:
    """Return the end of the word part at or after offset.

    A separator run right after the part belongs to it, so the next call
    starts on the following part.
    """
    length = len(text)
    while offset < length and not _is_word_part_char(text[offset]):
        offset += 1
    if offset == length:
        return length
    offset += 1
    while (
        offset < length
        and _is_word_part_char(text[offset])
        and not _is_word_part_boundary(text, offset)
    ):
        offset += 1
    while offset < length and text[offset] in SEPARATORS:
        offset += 1
    return offset


def map_offset(offset: int, edits: Sequence[TextEdit]) -> int:
    """Map an offset in the old text through edits sorted by start."""
    shift = 0
    for edit in edits:
        if offset >= edit.end:
            shift += len(edit.new_text) - (edit.end - edit.start)
        elif offset > edit.start:
            return edit.start + shift + len(edit.new_text)
        else:
            break
    return offset + shift


class TextBuffer:
    """In-memory editing host with code point offsets."""

    def __init__(
        self, text: str = "", selections: Sequence[Selection] = ()
    ) -> None:
        self._text = text
        self.selections: tuple[Selection, ...] = tuple(selections) or (
            Selection.cursor(0),
        )

    @property
    def text(self) -> str:
        return self._text

    async def apply_edits(self, edits: Sequence[TextEdit]) -> bool:
        ordered = sorted(edits, key=lambda edit: (edit.start, edit.end))
        for first, second in zip(ordered, ordered[1:], strict=False):
            if first.end > second.start:
                raise OverlappingEditsError(first, second)
        pieces: list[str] = []
        last = 0
        for edit in ordered:
            pieces.append(self._text[last : edit.start])
            pieces.append(edit.new_text)
            last = edit.end
        pieces.append(self._text[last:])
        self._text = "".join(pieces)
        self.selections = tuple(
            Selection(
                map_offset(selection.anchor, ordered),
                map_offset(selection.active, ordered),
            )
            for selection in self.selections
        )
        return True

    async def select_word_part_right(self) -> None:
        self.selections = tuple(
            Selection(
                selection.anchor,
                next_word_part_end(self._text, selection.active),
            )
            for selection in self.selections
        )

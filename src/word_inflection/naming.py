from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

SEPARATORS = ("-", "_")
_SEPARATOR_RUN = re.compile(r"[-_]+")

# characters that end a word part when an uppercase letter follows them
_BEFORE_UPPER = ("Ll", "Lo", "Nd")
# characters that start a titlecase-looking pair after an uppercase letter
_AFTER_UPPER = ("Ll", "Lo")


def category(char: str) -> str:
    return unicodedata.category(char)


def is_upper(char: str) -> bool:
    return category(char) == "Lu"


def is_lower(char: str) -> bool:
    return category(char) == "Ll"


def is_letter(char: str) -> bool:
    return category(char).startswith("L")


def is_digit(char: str) -> bool:
    return category(char) == "Nd"


class UnknownStyleError(ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown name style: {value}")
        self.value = value


@dataclass(frozen=True)
class NameStyleConfig:
    separator: str  # "_", "-", or ""
    capitalize_first: bool  # capitalize first word?
    capitalize_rest: bool  # capitalize words after first?
    upper: bool = False  # uppercase the whole result?


@unique
class NameStyle(Enum):
    _config: NameStyleConfig

    SNAKE_CASE = auto(), NameStyleConfig("_", False, False)  # snake_case
    SCREAMING_SNAKE_CASE = (  # SCREAMING_SNAKE_CASE
        auto(),
        NameStyleConfig("_", False, False, upper=True),
    )
    PASCAL_CASE = auto(), NameStyleConfig("", True, True)  # PascalCase
    CAMEL_CASE = auto(), NameStyleConfig("", False, True)  # camelCase
    KEBAB_CASE = auto(), NameStyleConfig("-", False, False)  # kebab-case
    CAPITAL_SNAKE_CASE = (  # Capital_Snake_Case
        auto(),
        NameStyleConfig("_", True, True),
    )

    def __new__(cls, value: int, config: NameStyleConfig) -> NameStyle:
        obj = object.__new__(cls)
        obj._value_ = value
        obj._config = config
        return obj

    @property
    def config(self) -> NameStyleConfig:
        return self._config

    @classmethod
    def from_string(cls, value: str) -> NameStyle:
        """Look up a style by name, e.g. "kebab", "screaming-snake"."""
        key = to_snake_case(value.strip()).upper()
        for candidate in (key, f"{key}_CASE"):
            if candidate in cls.__members__:
                return cls[candidate]
        raise UnknownStyleError(value)


def _split_case_boundaries(name: str) -> str:
    pieces: list[str] = []
    for i, current in enumerate(name):
        if i and is_upper(current) and category(name[i - 1]) in _BEFORE_UPPER:
            pieces.append("_")
        pieces.append(current)
    return "".join(pieces)


def _split_acronyms(name: str) -> str:
    pieces: list[str] = []
    run = 0  # uppercase letters seen directly before current
    for i, current in enumerate(name):
        following = name[i + 1 : i + 2]
        if (
            run
            and is_upper(current)
            and following
            and category(following) in _AFTER_UPPER
        ):
            pieces.append("_")
        run = run + 1 if is_upper(current) else 0
        pieces.append(current)
    return "".join(pieces)


def to_snake_case(name: str) -> str:
    """Canonicalize a name of any supported style: FooBar => foo_bar.

    The canonical form is the common intermediate of every other
    conversion.  Acronym runs are split before their last letter when a
    lowercase letter follows (XMLParser => xml_parser), a trailing acronym
    stays whole (parseXML => parse_xml).
    """
    name = _split_acronyms(_split_case_boundaries(name))
    return _SEPARATOR_RUN.sub("_", name).lower()


canonicalize = to_snake_case


def split_into_words(name: str) -> list[str]:
    return [word for word in to_snake_case(name).split("_") if word]


def capitalize(word: str) -> str:
    if not word:
        return ""
    return word[0].upper() + word[1:].lower()


def upcase(word: str) -> str:
    return word.upper()


def downcase(word: str) -> str:
    return word.lower()


def _render(words: Sequence[str], config: NameStyleConfig) -> str:
    transformed = [
        (
            capitalize(w)
            if (i == 0 and config.capitalize_first)
            or (i > 0 and config.capitalize_rest)
            else w
        )
        for i, w in enumerate(words)
    ]
    rendered = config.separator.join(transformed)
    return rendered.upper() if config.upper else rendered


def join_words(words: Sequence[str], style: NameStyle) -> str:
    return _render([word.lower() for word in words if word], style.config)


def convert_name(name: str, style: NameStyle) -> str:
    """Convert a name in any supported style to the given target style."""
    return _render(to_snake_case(name).split("_"), style.config)


def render(style: NameStyle | str, name: str) -> str:
    if isinstance(style, str):
        style = NameStyle.from_string(style)
    return convert_name(name, style)


def to_screaming_snake_case(name: str) -> str:
    return convert_name(name, NameStyle.SCREAMING_SNAKE_CASE)


def to_pascal_case(name: str) -> str:
    return convert_name(name, NameStyle.PASCAL_CASE)


def to_camel_case(name: str) -> str:
    return convert_name(name, NameStyle.CAMEL_CASE)


def to_kebab_case(name: str) -> str:
    return convert_name(name, NameStyle.KEBAB_CASE)


def to_capital_snake_case(name: str) -> str:
    return convert_name(name, NameStyle.CAPITAL_SNAKE_CASE)

from __future__ import annotations

from enum import Enum, unique
from typing import TYPE_CHECKING

from .naming import category, is_digit, is_letter, is_lower, is_upper

if TYPE_CHECKING:
    from collections.abc import Callable, Container


def _consists_of(
    name: str, categories: Container[str], *, extra: str = ""
) -> bool:
    return bool(name) and all(
        char in extra or category(char) in categories for char in name
    )


def _is_word_body(name: str, *, extra: str = "") -> bool:
    return all(
        char in extra or is_letter(char) or is_digit(char) for char in name
    )


def is_symbol(name: str) -> bool:
    return _consists_of(name, ("Ll", "Lo", "Nd"))


def is_snake_case(name: str) -> bool:
    return _consists_of(name, ("Ll", "Lo", "Nd"), extra="_")


def is_screaming_snake_case(name: str) -> bool:
    return _consists_of(name, ("Lu", "Lo", "Nd"), extra="_")


def is_pascal_case(name: str) -> bool:
    return (
        any(is_lower(char) for char in name)
        and is_upper(name[0])
        and _is_word_body(name[1:])
    )


def is_camel_case(name: str) -> bool:
    return (
        any(is_upper(char) for char in name)
        and is_lower(name[0])
        and _is_word_body(name[1:])
    )


def is_kebab_case(name: str) -> bool:
    return "-" in name


def is_capital_snake_case(name: str) -> bool:
    return (
        "_" in name
        and is_upper(name[0])
        and _is_word_body(name[1:], extra="_")
    )


@unique
class DetectedStyle(Enum):
    """Shape of a name as seen by the cycle tables.

    Shapes overlap (a lone lowercase word is both a symbol and snake_case),
    members are declared in the order they are checked.
    """

    SYMBOL = "symbol"
    SNAKE_CASE = "snake_case"
    SCREAMING_SNAKE_CASE = "screaming_snake_case"
    PASCAL_CASE = "pascal_case"
    CAMEL_CASE = "camel_case"
    KEBAB_CASE = "kebab_case"
    CAPITAL_SNAKE_CASE = "capital_snake_case"

    def matches(self, name: str) -> bool:
        return _PREDICATES[self](name)


_PREDICATES: dict[DetectedStyle, Callable[[str], bool]] = {
    DetectedStyle.SYMBOL: is_symbol,
    DetectedStyle.SNAKE_CASE: is_snake_case,
    DetectedStyle.SCREAMING_SNAKE_CASE: is_screaming_snake_case,
    DetectedStyle.PASCAL_CASE: is_pascal_case,
    DetectedStyle.CAMEL_CASE: is_camel_case,
    DetectedStyle.KEBAB_CASE: is_kebab_case,
    DetectedStyle.CAPITAL_SNAKE_CASE: is_capital_snake_case,
}


def detect(name: str) -> list[DetectedStyle]:
    """Return every style the name satisfies, in priority order."""
    return [style for style in DetectedStyle if style.matches(name)]


def detect_first(name: str) -> DetectedStyle | None:
    return next(
        (style for style in DetectedStyle if style.matches(name)), None
    )

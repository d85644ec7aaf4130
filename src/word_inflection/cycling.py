"""Cycle and toggle policies over name styles.

Each policy is a transition table checked top to bottom; the first row whose
source shapes match the current name decides the target style, and the
fallback closes the cycle:

- all:    foo_bar => FOO_BAR => FooBar => fooBar => foo-bar => Foo_Bar
- ruby:   foo_bar => FOO_BAR => FooBar
- python: foo_bar => FOO_BAR => FooBar
- elixir: foo_bar => FooBar
- java:   fooBar => FOO_BAR => FooBar
- toggle: foo_bar => FooBar => fooBar
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique

from .detection import DetectedStyle
from .naming import NameStyle, convert_name


class UnknownPolicyError(ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown cycle policy: {value}")
        self.value = value


@dataclass(frozen=True)
class Transition:
    sources: tuple[DetectedStyle, ...]
    target: NameStyle

    def matches(self, name: str) -> bool:
        return any(source.matches(name) for source in self.sources)


@dataclass(frozen=True)
class CycleTable:
    transitions: tuple[Transition, ...]
    fallback: NameStyle

    @property
    def period(self) -> int:
        """Number of steps after which a name returns to its shape."""
        return len(self.transitions) + 1

    def next_style(self, name: str) -> NameStyle:
        for transition in self.transitions:
            if transition.matches(name):
                return transition.target
        return self.fallback

    def apply(self, name: str) -> str:
        return convert_name(name, self.next_style(name))


def _table(
    *transitions: tuple[tuple[DetectedStyle, ...], NameStyle],
    fallback: NameStyle,
) -> CycleTable:
    return CycleTable(
        tuple(Transition(sources, target) for sources, target in transitions),
        fallback,
    )


_ALL = _table(
    (
        (DetectedStyle.SYMBOL, DetectedStyle.SNAKE_CASE),
        NameStyle.SCREAMING_SNAKE_CASE,
    ),
    ((DetectedStyle.SCREAMING_SNAKE_CASE,), NameStyle.PASCAL_CASE),
    ((DetectedStyle.PASCAL_CASE,), NameStyle.CAMEL_CASE),
    ((DetectedStyle.CAMEL_CASE,), NameStyle.KEBAB_CASE),
    # kebab-case moves on to Capital_Snake_Case, not back to snake_case
    ((DetectedStyle.KEBAB_CASE,), NameStyle.CAPITAL_SNAKE_CASE),
    fallback=NameStyle.SNAKE_CASE,
)
_RUBY = _table(
    ((DetectedStyle.SNAKE_CASE,), NameStyle.SCREAMING_SNAKE_CASE),
    ((DetectedStyle.SCREAMING_SNAKE_CASE,), NameStyle.PASCAL_CASE),
    fallback=NameStyle.SNAKE_CASE,
)
_ELIXIR = _table(
    ((DetectedStyle.SNAKE_CASE,), NameStyle.PASCAL_CASE),
    fallback=NameStyle.SNAKE_CASE,
)
_JAVA = _table(
    (
        (DetectedStyle.SNAKE_CASE, DetectedStyle.CAMEL_CASE),
        NameStyle.SCREAMING_SNAKE_CASE,
    ),
    ((DetectedStyle.SCREAMING_SNAKE_CASE,), NameStyle.PASCAL_CASE),
    fallback=NameStyle.CAMEL_CASE,
)
_TOGGLE = _table(
    ((DetectedStyle.SNAKE_CASE,), NameStyle.PASCAL_CASE),
    ((DetectedStyle.PASCAL_CASE,), NameStyle.CAMEL_CASE),
    fallback=NameStyle.SNAKE_CASE,
)
_SNAKE_KEBAB = _table(
    ((DetectedStyle.SNAKE_CASE,), NameStyle.KEBAB_CASE),
    fallback=NameStyle.SNAKE_CASE,
)
_PASCAL_CAMEL = _table(
    ((DetectedStyle.PASCAL_CASE,), NameStyle.CAMEL_CASE),
    fallback=NameStyle.PASCAL_CASE,
)


@unique
class CyclePolicy(Enum):
    _table: CycleTable

    ALL = "all", _ALL
    RUBY = "ruby", _RUBY
    PYTHON = "python", _RUBY
    ELIXIR = "elixir", _ELIXIR
    JAVA = "java", _JAVA
    TOGGLE = "toggle", _TOGGLE
    SNAKE_KEBAB = "snake_kebab", _SNAKE_KEBAB
    PASCAL_CAMEL = "pascal_camel", _PASCAL_CAMEL

    def __new__(cls, value: str, table: CycleTable) -> CyclePolicy:
        obj = object.__new__(cls)
        obj._value_ = value
        obj._table = table
        return obj

    @property
    def table(self) -> CycleTable:
        return self._table

    @classmethod
    def from_string(cls, value: str) -> CyclePolicy:
        key = value.strip().lower().replace("-", "_")
        for policy in cls:
            if policy.value == key:
                return policy
        raise UnknownPolicyError(value)


@unique
class BinaryPair(Enum):
    SNAKE_KEBAB = "snake_kebab"
    PASCAL_CAMEL = "pascal_camel"

    @property
    def policy(self) -> CyclePolicy:
        return CyclePolicy[self.name]

    @classmethod
    def from_string(cls, value: str) -> BinaryPair:
        key = value.strip().lower().replace("-", "_")
        for pair in cls:
            if pair.value == key:
                return pair
        raise UnknownPolicyError(value)


def cycle(name: str, policy: CyclePolicy | str = CyclePolicy.ALL) -> str:
    if isinstance(policy, str):
        policy = CyclePolicy.from_string(policy)
    return policy.table.apply(name)


def toggle(name: str) -> str:
    """Toggle snake_case => PascalCase => camelCase => snake_case."""
    return CyclePolicy.TOGGLE.table.apply(name)


def cycle_binary(name: str, pair: BinaryPair | str) -> str:
    if isinstance(pair, str):
        pair = BinaryPair.from_string(pair)
    return pair.policy.table.apply(name)


def cycle_snake_kebab(name: str) -> str:
    return cycle_binary(name, BinaryPair.SNAKE_KEBAB)


def cycle_pascal_camel(name: str) -> str:
    return cycle_binary(name, BinaryPair.PASCAL_CAMEL)

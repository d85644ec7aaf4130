from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto, unique
from functools import partial
from types import MappingProxyType
from typing import TYPE_CHECKING

from .cycling import (
    CyclePolicy,
    cycle,
    cycle_pascal_camel,
    cycle_snake_kebab,
    toggle,
)
from .editor import transform_selection, transform_word_part
from .naming import (
    capitalize,
    downcase,
    to_camel_case,
    to_capital_snake_case,
    to_kebab_case,
    to_pascal_case,
    to_screaming_snake_case,
    to_snake_case,
    upcase,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .editor import EditorHost, Transform

logger = logging.getLogger(__name__)


class UnknownCommandError(KeyError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown command: {value}")
        self.value = value


@unique
class CommandKind(Enum):
    WORD = auto()  # whole word at the cursor, or the selection
    WORD_PART = auto()  # word part at or after the cursor


@dataclass(frozen=True)
class Command:
    command_id: str
    name: str
    transform: Transform
    kind: CommandKind = CommandKind.WORD

    async def run(self, host: EditorHost) -> bool:
        logger.debug(f"Running {self.command_id}")
        if self.kind is CommandKind.WORD_PART:
            return await transform_word_part(host, self.transform)
        return await transform_selection(host, self.transform)


def _cycle_command(command_id: str, policy: CyclePolicy) -> Command:
    name = "cycle" if policy is CyclePolicy.ALL else f"cycle-{policy.value}"
    return Command(command_id, name, partial(cycle, policy=policy))


COMMANDS: Mapping[str, Command] = MappingProxyType(
    {
        command.command_id: command
        for command in (
            _cycle_command("stringInflection.cycle", CyclePolicy.ALL),
            _cycle_command("stringInflection.cycleRuby", CyclePolicy.RUBY),
            _cycle_command(
                "stringInflection.cyclePython", CyclePolicy.PYTHON
            ),
            _cycle_command(
                "stringInflection.cycleElixir", CyclePolicy.ELIXIR
            ),
            _cycle_command("stringInflection.cycleJava", CyclePolicy.JAVA),
            Command(
                "stringInflection.cycleSnakeKebab",
                "cycle-snake-kebab",
                cycle_snake_kebab,
            ),
            Command(
                "stringInflection.cycleCamelCase",
                "cycle-pascal-camel",
                cycle_pascal_camel,
            ),
            Command("stringInflection.toSnakeCase", "snake", to_snake_case),
            Command(
                "stringInflection.toScreamingSnakeCase",
                "screaming-snake",
                to_screaming_snake_case,
            ),
            Command(
                "stringInflection.toPascalCase", "pascal", to_pascal_case
            ),
            Command("stringInflection.toCamelCase", "camel", to_camel_case),
            Command("stringInflection.toKebabCase", "kebab", to_kebab_case),
            Command(
                "stringInflection.toCapitalSnakeCase",
                "capital-snake",
                to_capital_snake_case,
            ),
            Command("stringInflection.toggle", "toggle", toggle),
            Command(
                "stringInflection.wordPartCapitalize",
                "capitalize",
                capitalize,
                CommandKind.WORD_PART,
            ),
            Command(
                "stringInflection.wordPartUpcase",
                "upcase",
                upcase,
                CommandKind.WORD_PART,
            ),
            Command(
                "stringInflection.wordPartDowncase",
                "downcase",
                downcase,
                CommandKind.WORD_PART,
            ),
        )
    }
)


def find_command(key: str) -> Command:
    """Look up a command by its id or its short name."""
    if (command := COMMANDS.get(key)) is not None:
        return command
    for command in COMMANDS.values():
        if command.name == key:
            return command
    raise UnknownCommandError(key)


async def run_command(host: EditorHost, key: str) -> bool:
    return await find_command(key).run(host)

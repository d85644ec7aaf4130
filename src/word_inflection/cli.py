from __future__ import annotations

import argparse
import logging
import sys
from functools import partial
from typing import TYPE_CHECKING

from .commands import COMMANDS, find_command
from .cycling import CyclePolicy, UnknownPolicyError, cycle
from .detection import detect
from .editor import transform_words
from .log_utility import add_log_arguments, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .editor import Transform

logger = logging.getLogger(__name__)

DETECT = "detect"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-inflection",
        description=(
            "Convert identifiers between naming styles.  Words given as"
            " arguments are converted one per line; without arguments every"
            " word of every line on stdin is converted in place."
        ),
    )
    parser.add_argument(
        "command",
        choices=[*(command.name for command in COMMANDS.values()), DETECT],
        help="Conversion to apply, or 'detect' to list matching styles.",
    )
    parser.add_argument("words", nargs="*", metavar="WORD")
    parser.add_argument(
        "--policy",
        help="Cycle policy for 'cycle': all, ruby, python, elixir, java.",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=1,
        help="Apply the conversion this many times.",
    )
    add_log_arguments(parser)
    return parser


def describe(word: str) -> str:
    styles = ", ".join(style.value for style in detect(word)) or "-"
    return f"{word}\t{styles}"


def repeated(transform: Transform, steps: int) -> Transform:
    def apply(word: str) -> str:
        for _ in range(steps):
            word = transform(word)
        return word

    return apply


def resolve_transform(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> Transform:
    if args.steps < 1:
        parser.error("--steps must be at least 1")
    if args.policy is not None and args.command != "cycle":
        parser.error("--policy only applies to 'cycle'")
    if args.command == DETECT:
        return describe
    if args.policy is not None:
        try:
            policy = CyclePolicy.from_string(args.policy)
        except UnknownPolicyError as error:
            parser.error(str(error))
        transform: Transform = partial(cycle, policy=policy)
    else:
        transform = find_command(args.command).transform
    return repeated(transform, args.steps)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    configure_logging(args)
    transform = resolve_transform(parser, args)
    logger.info(f"Running {args.command} with {args.steps} step(s)")
    if args.words:
        for word in args.words:
            print(transform(word))
    elif args.command == DETECT:
        for line in sys.stdin:
            for word in line.split():
                print(describe(word))
    else:
        for line in sys.stdin:
            sys.stdout.write(transform_words(line, transform))
    return 0

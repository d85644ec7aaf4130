from __future__ import annotations

import argparse
import logging
from dataclasses import KW_ONLY, dataclass
from logging import Handler
from logging.handlers import RotatingFileHandler
from pathlib import Path

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = __package__ or "word_inflection"
CONSOLE_FORMAT = "{levelname:s}: {message:s}"
FILE_FORMAT = (
    "[{asctime:s}.{msecs:03.0f}] [{levelname:s}] {name:s}: {message:s}"
)


@dataclass
class LogFileOptions:
    path: Path
    _ = KW_ONLY
    max_kb: int = 512  # 0 for unbounded size and no rotation
    backup_count: int = 1  # 0 for no rolling backups
    level: int = logging.DEBUG
    encoding: str = "utf-8"
    append: bool = True

    def create_handler(self) -> Handler:
        handler = RotatingFileHandler(
            self.path,
            mode="a" if self.append else "w",
            encoding=self.encoding,
            maxBytes=self.max_kb * 1024,
            backupCount=self.backup_count,
        )
        handler.setLevel(self.level)
        handler.setFormatter(
            logging.Formatter(
                fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S", style="{"
            )
        )
        return handler


class SuppressCommandLineRecords(logging.Filter):
    """Keep the command line's own records off the console.

    The console carries converted names on stdout; its diagnostics only go
    to the log file.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name != f"{PACKAGE_LOGGER}.cli"


def configure_logging_custom(
    console_level: int, log_file_options: LogFileOptions | None = None
) -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = []
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        logging.Formatter(fmt=CONSOLE_FORMAT, style="{")
    )
    console_handler.addFilter(SuppressCommandLineRecords())
    package_logger.addHandler(console_handler)
    level = console_level
    if log_file_options:
        level = min(level, log_file_options.level)
        package_logger.addHandler(log_file_options.create_handler())
    package_logger.setLevel(level)
    logger.debug(f"logging configured at level {logging.getLevelName(level)}")


def add_log_arguments(parser: argparse.ArgumentParser) -> None:
    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-file",
        metavar="FILE",
        help="Path to a file where logs will be written, if specified.",
    )
    log_verbosity_group = log_group.add_mutually_exclusive_group(
        required=False
    )
    log_verbosity_group.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        dest="console_level",
        const=logging.INFO,
        help="Increase console log level to INFO.",
    )
    log_verbosity_group.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        dest="console_level",
        const=logging.ERROR,
        help="Decrease console log level to ERROR.",
    )
    log_verbosity_group.add_argument(
        "--debug",
        action="store_const",
        dest="console_level",
        const=logging.DEBUG,
        help="Maximize console log verbosity to DEBUG.",
    )


def configure_logging(args: argparse.Namespace) -> None:
    configure_logging_custom(
        console_level=args.console_level or logging.WARNING,
        log_file_options=(
            None
            if not args.log_file
            else LogFileOptions(path=Path(args.log_file))
        ),
    )

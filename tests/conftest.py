from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from word_inflection.log_utility import PACKAGE_LOGGER

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger's handlers and level afterwards."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)

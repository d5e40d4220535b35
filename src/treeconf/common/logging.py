"""Logging utilities for treeconf using Loguru.

Logging is disabled by default when treeconf is imported as a library.
Applications can turn it on with ``treeconf.enable_logging()``.
"""

import sys
from typing import Literal, TextIO, TypeAlias

import loguru
from loguru import logger

from treeconf.constants import APP_NAME

LogLevel: TypeAlias = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: LogLevel = "INFO", sink: TextIO = sys.stderr) -> int:
    logger.enable(APP_NAME)
    logger.remove()

    handler_id = logger.add(
        sink,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )

    return handler_id


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"

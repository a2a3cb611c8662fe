"""Logging helpers.

Library modules only ask for a logger; handlers are installed by
:func:`configure_logging`, which the command line interface calls once.
"""

import logging
from enum import Enum

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = __package__


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: LogLevel | str = LogLevel.WARNING) -> logging.Logger:
    """Attach a Rich handler writing to stderr to the package logger.

    Calling it again replaces the previous handler instead of stacking a new one.
    """
    level = LogLevel(level.upper())
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(
        console=Console(stderr=True), rich_tracebacks=True, show_path=False
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel(level.value)
    return logger

"""
Logger setup for dwmstatus.

All module loggers hang below the ``dwmstatus`` logger, which writes to stderr
through rich so stdout stays free for the status line in console mode.
"""
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "dwmstatus"
DEFAULT_LEVEL_NAME = "WARNING"
DEFAULT_LOG_FORMAT = "%(name)s: %(message)s"


def _get_log_level(level_name: str, default_level: int = logging.WARNING) -> int:
    """
    Convert a log level string to the logging level constant.

    :param level_name: Name of the log level (e.g. 'DEBUG')
    :param default_level: Level used when level_name is not a known level
    :return: The corresponding logging level constant
    """
    level = logging.getLevelName(str(level_name).upper())
    if isinstance(level, int):
        return level
    logging.getLogger(ROOT_LOGGER_NAME).warning(
        f"Invalid log level name '{level_name}'. "
        f"Using {logging.getLevelName(default_level)}.")
    return default_level


def setup_logging(level_name: str = DEFAULT_LEVEL_NAME,
                  console: Optional[Console] = None) -> logging.Logger:
    """
    Configure the package logger; calling it again replaces the handler.

    :param level_name: Threshold for emitted records
    :param console: Rich console to log to, stderr when omitted
    :return: The configured ``dwmstatus`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(_get_log_level(level_name))
    logger.propagate = False

    if logger.hasHandlers():
        logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger below the package logger.

    :param name: Usually ``__name__`` of the calling module
    :return: The logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)

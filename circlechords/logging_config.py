"""Logging set-up for the ``circlechords`` logger.

Modules log through ``logging.getLogger(__name__)``; only the entry point calls
:func:`setup_logging`.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "circlechords"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _release_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send package log records to stdout and, optionally, to ``log_file``.

    Calling it again replaces the handlers from the previous call and closes
    them, so an earlier log file is released.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    _release_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized at %s.", logging.getLevelName(level))
    return logger

"""Logging for the CoreNLP client

Every library logger lives below ``LOGGER_NAME``. Nothing is configured on
import; applications either configure the root logger themselves or call
``setup_logging()``.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from .config import settings

LOGGER_NAME = "corenlp_client"


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Attach handlers to the client's logger tree

    Args:
        log_level: Logging level name, defaults to ``settings.log_level``
        log_file: Also write records to this file
        stream: Console stream, defaults to stdout

    Returns:
        The ``corenlp_client`` logger
    """
    level = getattr(logging, (log_level or settings.log_level).upper())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(settings.log_format)
    handlers = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, placed under ``corenlp_client``"""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")

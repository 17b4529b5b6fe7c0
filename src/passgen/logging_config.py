"""
Logging setup for the passgen command.
"""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = 'passgen'


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure the package logger to write to standard error.

    Existing handlers are removed first so repeated calls (for example
    from tests invoking ``main`` several times) do not duplicate output.

    Args:
        level: Minimum level emitted by the logger.

    Returns:
        The configured ``passgen`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger

"""Logging configuration for the tilelayout namespace."""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the 'tilelayout' logger.

    The library itself only logs at DEBUG, so the default level keeps it
    quiet. Console output goes to stderr to keep stdout free for the CLI's
    tile listing.

    Args:
        level: Logging level (e.g. logging.DEBUG for the CLI's -v)
        log_file: Optional path to also write logs to
        stream: Console stream, defaults to sys.stderr

    Returns:
        The configured 'tilelayout' logger
    """
    logger = logging.getLogger("tilelayout")
    logger.setLevel(level)

    # called once per CLI run; replace rather than stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at %s", logging.getLevelName(level))
    return logger

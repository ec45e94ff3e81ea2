"""Logging configuration helpers."""

import logging

LOGGER_NAME = "pachinko_tracker"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Set up the package logger and return it.

    Repeated calls only adjust the level; the stream handler is attached once
    and records stop at the package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger

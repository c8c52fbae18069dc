"""Logging setup for the devsync CLI."""

import logging

PACKAGE_LOGGER = "devmode_sync"


def configure_logging(log_level: str = "INFO") -> None:
    """Configure the package logger.

    Installs a single stream handler on the ``devmode_sync`` logger; calling
    it again replaces the handler instead of adding a duplicate.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR).
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    if level == logging.DEBUG:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)

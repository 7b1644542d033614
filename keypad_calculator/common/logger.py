"""Shared logger for the keypad calculator."""
import logging
from typing import Optional


LOG_FORMAT = "[%(asctime)s] %(name)s %(levelname)s: %(message)s"

logger = logging.getLogger("keypad_calculator")


def configure_logging(level: Optional[str] = None) -> None:
    """
    Attach a stream handler to the package logger and set its level.

    Calling it again only updates the level.

    :param str level: Level name such as "DEBUG" or "info", defaults to INFO
    """
    lvl = getattr(logging, (level or "INFO").upper(), logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(lvl)

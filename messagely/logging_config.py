"""Logging configuration for data-access events."""
import logging
from logging.handlers import RotatingFileHandler

from .config import LOG_FILE, LOG_LEVEL


def configure_logging() -> logging.Logger:
    """Configure the shared messagely logger with a rotating file handler."""
    logger = logging.getLogger("messagely")
    logger.setLevel(LOG_LEVEL)
    if not logger.handlers:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger

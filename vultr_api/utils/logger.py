"""Logging setup for the client's own logger tree."""
import logging
from logging import Logger

from vultr_api.config.settings import Settings

PACKAGE_LOGGER = "vultr_api"


def configure_logging(settings: Settings) -> Logger:
    """Set the level of the `vultr_api` logger; handlers are left to the host application."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def get_logger(name: str) -> Logger:
    """Get a named logger."""
    return logging.getLogger(name)

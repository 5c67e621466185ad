"""
Logging setup for Menagerie.

Attaches a single handler to the ``menagerie`` logger based on a
``LoggingConfig``: a rotating file handler when a file path is configured,
a stream handler otherwise.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import LoggingConfig, get_config

PACKAGE_LOGGER = "menagerie"


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the package logger.

    Calling it again replaces the handler installed by a previous call.

    Args:
        config: Logging settings; defaults to the global configuration's

    Returns:
        The configured package logger
    """
    if config is None:
        config = get_config().logging

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_menagerie_handler", False):
            logger.removeHandler(handler)
            handler.close()

    if config.file_path:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(config.format))
    handler._menagerie_handler = True
    logger.addHandler(handler)
    logger.setLevel(config.level_number)

    logger.debug(f"Logging configured at {config.level}")
    return logger

# -*- coding: utf-8 -*-
"""
Logging setup for the training flow.

Every module logs through a child of the Config.LOGGER_NAME logger, which
writes DEBUG and above to a rotating file and Config.LOG_LEVEL and above to
stdout.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from app.config import Config


def _file_handler() -> logging.Handler:
    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(Config.LOG_FILE_FORMAT, datefmt=Config.LOG_DATE_FORMAT))
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, Config.LOG_LEVEL, logging.INFO))
    handler.setFormatter(logging.Formatter(Config.LOG_CONSOLE_FORMAT))
    return handler


def setup_logger() -> logging.Logger:
    """(Re)configure the application logger and return it."""
    logger = logging.getLogger(Config.LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(_file_handler())
    logger.addHandler(_console_handler())
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger for a module; configures the application logger on first use."""
    root = logging.getLogger(Config.LOGGER_NAME)
    if not root.handlers:
        setup_logger()
    return root.getChild(name)

# -*- coding: utf-8 -*-
"""
Simple Localization Central Logging Module

Provides the standard logging configuration for the whole package.
Handlers are only configured on the root 'simloc' logger.
Child loggers propagate to root and do not add handlers themselves.

Console level comes from SIMLOC_LOG_LEVEL (default WARNING).
A DEBUG-level log file is written only when SIMLOC_LOG_FILE is set.
"""

import logging
import os

import simloc_config as config

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Flag to track if root logger is configured
_root_configured = False


def _console_level() -> int:
    level_name = os.environ.get(config.LOG_LEVEL_ENV, config.DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        return logging.getLevelName(config.DEFAULT_LOG_LEVEL)
    return level


def _configure_root_logger():
    """Configure the root 'simloc' logger with handlers (once only)."""
    global _root_configured
    if _root_configured:
        return

    root_logger = logging.getLogger("simloc")
    root_logger.setLevel(logging.DEBUG)

    # Prevent propagation to Python's root logger to avoid duplicates
    root_logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_console_level())
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)

    log_file = os.environ.get(config.LOG_FILE_ENV)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root_logger.addHandler(file_handler)

    _root_configured = True


# Package logger - configure root on module load
_configure_root_logger()
logger = logging.getLogger("simloc")


def get_logger(name: str) -> logging.Logger:
    """
    Return a child logger for a module.

    Child loggers do NOT add handlers - they propagate to the root 'simloc' logger.

    Args:
        name: Module name

    Returns:
        Logger named simloc.{name}
    """
    _configure_root_logger()
    return logging.getLogger(f"simloc.{name}")


def set_console_level(level) -> None:
    """Change the console handler level at runtime (used by the CLI --verbose flag)."""
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)

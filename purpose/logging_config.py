"""
Logging Configuration
Sets up the package logger for the CLI.

Library code only calls logging.getLogger(__name__); nothing is
printed unless an application (or the CLI) calls setup_logging().
"""

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "purpose"


def level_from_env(default: int = logging.WARNING) -> int:
    """Log level named by PURPOSE_LOG_LEVEL (e.g. DEBUG), else `default`."""
    name = os.environ.get("PURPOSE_LOG_LEVEL", "").upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'purpose' namespace logger.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to also write logs to.

    Returns:
        The configured logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    # Diagnostics go to stderr so they never mix with command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger

"""
Logging configuration for the fact-check pipeline.

Modules log through ``logging.getLogger(__name__)``; entry points call
``setup_logging`` once to attach console and file handlers to the root
logger.
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from src.config import LOG_DIR, LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ERROR_LOG_NAME = "error.log"
COMBINED_LOG_NAME = "combined.log"
DAILY_LOG_NAME = "daily.log"
DAILY_BACKUP_COUNT = 7


def setup_logging(
    level: str = LOG_LEVEL,
    log_dir: Optional[Union[str, Path]] = LOG_DIR,
    console: bool = True,
) -> logging.Logger:
    """
    Set up logging for the whole application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for error, combined and daily log files.
            None disables file logging.
        console: Whether to enable console logging

    Returns:
        Configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        error_handler = logging.FileHandler(log_path / ERROR_LOG_NAME)
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        logger.addHandler(error_handler)

        combined_handler = logging.FileHandler(log_path / COMBINED_LOG_NAME)
        combined_handler.setFormatter(formatter)
        logger.addHandler(combined_handler)

        daily_handler = TimedRotatingFileHandler(
            log_path / DAILY_LOG_NAME,
            when="midnight",
            backupCount=DAILY_BACKUP_COUNT,
        )
        daily_handler.setFormatter(formatter)
        logger.addHandler(daily_handler)

    return logger

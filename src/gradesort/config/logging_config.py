"""
Centralized logging configuration for grade ordering.

Provides structured JSON logging through Loguru.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from gradesort.config.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_FILE_RETENTION,
    LOG_FILE_ROTATION,
)


def setup_structured_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    serialize: bool = True
) -> None:
    """
    Configure structured JSON logging with Loguru.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (for local development)
        serialize: Emit JSON records instead of plain text on stdout

    Returns:
        None (Loguru configures its own handlers)
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stdout,
        serialize=serialize,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name} | {message}",
        level=level,
        backtrace=True,
        diagnose=False
    )

    # File handler (optional - for local development)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            serialize=True,
            level="DEBUG",    # Always debug to file
            rotation=LOG_FILE_ROTATION,
            retention=LOG_FILE_RETENTION
        )


def setup_logging_from_settings() -> None:
    """Configure logging from the ``GRADE_SORT_LOG_*`` settings."""
    from gradesort.config.settings import get_settings

    settings = get_settings()
    setup_structured_logging(level=settings.log_level, log_file=settings.log_file)


def get_logger(name: str):
    """
    Get a logger for a specific module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance with module binding
    """
    return logger.bind(module=name)

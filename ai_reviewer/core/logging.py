"""
Logging configuration for the AI PR Reviewer.
"""

import sys
from typing import Optional

from loguru import logger


def configure_logging(debug: bool = False, environment: str = "development") -> None:
    """Configure logging for the action run."""

    logger.remove()

    log_level = "DEBUG" if debug else "INFO"

    if environment == "development":
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<blue>{name}</blue>:<blue>{function}</blue>:<blue>{line}</blue> - "
                "<level>{message}</level>"
            ),
            level=log_level,
            colorize=True,
            backtrace=True,
            diagnose=True,
        )
    else:
        # Actions log viewer: no ANSI colours, one line per record
        logger.add(
            sys.stderr,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
                "{name}:{function}:{line} - {message}"
            ),
            level=log_level,
            colorize=False,
        )


def get_logger(name: Optional[str] = None):
    """Get a logger instance with optional name binding."""
    if name:
        return logger.bind(logger_name=name)
    return logger

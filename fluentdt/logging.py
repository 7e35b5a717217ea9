"""Logging configuration for fluentdt."""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

def setup_logging(log_file: Optional[Path] = None, level: str = "INFO"):
    """Configure logging for the application.

    Args:
        log_file: Optional path to log file. If not provided, logs will only go to stderr.
        level: Minimum level for the stderr handler.
    """
    # Remove default handler
    logger.remove()
    logger.enable("fluentdt")

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
        level=level
    )

    if log_file is not None:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="1 week",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
                   "{name}:{function}:{line} - {message}",
            level="DEBUG"       # file sink keeps the week-correction traces
        )

__all__ = ['logger', 'setup_logging']

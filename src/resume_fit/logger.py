"""
Centralized logging configuration for resume-fit.

Sets up the ``resume_fit`` logger with a detailed file log and a short
console log. Modules grab child loggers through ``get_logger``.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional


def setup_logging(
    log_dir: Path,
    log_level: str = "INFO",
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        log_dir: Directory where log files will be stored
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to log to file
        log_to_console: Whether to log to console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("resume_fit")
    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    # Re-running setup must not stack handlers
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)8s] %(name)s:%(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    simple_formatter = logging.Formatter(
        fmt="[%(levelname)s] %(message)s",
        datefmt="%H:%M:%S"
    )

    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"resume_fit_{timestamp}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # File gets everything
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(simple_formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional logger name (defaults to 'resume_fit')

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"resume_fit.{name}")
    return logging.getLogger("resume_fit")


def init_logger(log_dir: Path, log_level: str = "INFO", log_to_file: bool = True) -> logging.Logger:
    """Initialize the package logger; called once by main.py."""
    return setup_logging(log_dir, log_level, log_to_file=log_to_file)

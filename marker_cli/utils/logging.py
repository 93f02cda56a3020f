"""
Logging configuration utilities for Marker CLI.

Diagnostics go to stderr so that stdout only carries command results.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from ..config import MarkerConfig


def setup_logging(config: Optional[MarkerConfig] = None, level: Optional[str] = None) -> None:
    """
    Configure logging based on MarkerConfig settings.

    Args:
        config: MarkerConfig instance. If None, uses sensible defaults.
        level: Level name overriding the configured one (e.g. "DEBUG" for --verbose).

    Features:
        - Configurable log level (DEBUG, INFO, WARNING, ERROR)
        - Optional file logging with rotation
        - Custom log format

    Raises:
        OSError: If the log file cannot be opened
        ValueError: If the log format is invalid

    Example:
        config = MarkerConfig.load("config.yaml")
        setup_logging(config)
    """
    if config is None:
        config = MarkerConfig()

    level_name = str(level or config.log_level).upper()
    numeric_level = getattr(logging, level_name, logging.WARNING)

    # Build handlers first so a bad file or format leaves logging untouched
    formatter = logging.Formatter(config.log_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        handlers.append(RotatingFileHandler(
            config.log_file,
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
            encoding="utf-8",
        ))

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

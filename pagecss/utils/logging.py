"""Logging utility for pagecss."""

import logging
import os
from typing import Optional

from .config import LOG_FILE

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level: int = logging.INFO, log_file: Optional[str] = LOG_FILE) -> None:
    """Set up logging configuration.

    Sanitizer rejections are only reported here, so hosts that care about
    silently dropped CSS should keep a log file.

    Args:
        log_level: Root log level
        log_file: Path of the diagnostic log file, or None for console only
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers
    )

# Exported functions
__all__ = ['setup_logging']

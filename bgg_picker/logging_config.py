"""
Centralized logging configuration for the BGG picker package.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config import LOGS_DIR, LOG_LEVEL


def setup_logging(log_file: Optional[str] = None, level: int = LOG_LEVEL) -> None:
    """
    Set up centralized logging for the BGG picker package.

    Console output goes to stderr so the CLI can keep stdout for game names.

    Args:
        log_file: Name of the log file, or None to log to the console only
        level: Logging level
    """
    # Avoid duplicate handlers if already configured
    if logging.getLogger().handlers:
        return

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        # Default to logs dir if bare filename provided
        log_path = Path(log_file)
        if not log_path.is_absolute():
            log_path = LOGS_DIR / log_path.name
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(str(log_path))
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    # Reduce noise from external libraries
    logging.getLogger('requests').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)

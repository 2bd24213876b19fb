"""
Centralized error handling and logging for the forced exit mod.

This module provides:
- The shared "forced_exit" logger (file + console)
- Custom exception types for the mod's error categories
- log_error() for logging an exception with context
"""
import logging
import traceback
from pathlib import Path
from typing import Optional
from datetime import datetime

# Setup logging directory
LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
LOG_DIR.mkdir(exist_ok=True)

# Configure logger
logger = logging.getLogger("forced_exit")
logger.setLevel(logging.DEBUG)

# Prevent duplicate handlers
if not logger.handlers:
    # File handler for detailed logs
    log_file = LOG_DIR / f"forced_exit_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )

    # Console handler for warnings/errors
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s: %(message)s')
    )

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)


class ModError(Exception):
    """Base exception for mod-specific errors."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class ConfigError(ModError):
    """Error while reading or writing the mod options file."""
    pass


class SaveError(ModError):
    """Error while the host writes a save file."""
    pass


class InvalidClockFormatError(ModError, ValueError):
    """Raised when a clock format outside ClockFormat reaches the renderer."""
    pass


def log_error(error: Exception, context: str = "") -> None:
    """
    Log an error with context information.

    Args:
        error: The exception that occurred
        context: Where the error occurred (e.g., "save_game", "options_load")
    """
    error_type = type(error).__name__
    trace = traceback.format_exc()

    logger.error(f"Error in {context}: {error_type}: {error}\n{trace}")

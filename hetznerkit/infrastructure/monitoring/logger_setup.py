"""Logging configuration for applications built on hetznerkit.

The library only creates module loggers below the 'hetznerkit' logger and
never touches the root logger. Call setup_logging() from an application
entry point to get console (and optionally file) output for the library's
messages without disturbing handlers the application installed itself.
"""

import logging
import sys
from typing import Optional

LIBRARY_LOGGER_NAME = "hetznerkit"
DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(
    log_level: int = DEFAULT_LOG_LEVEL,
    log_format: str = DEFAULT_LOG_FORMAT,
    log_file: Optional[str] = None,
    propagate: bool = False,
) -> logging.Logger:
    """Configures the 'hetznerkit' logger.

    Calling it again replaces the handlers of the previous call.

    Args:
        log_level: The minimum logging level (e.g., logging.DEBUG, logging.INFO).
        log_format: The format string for log messages.
        log_file: Optional path to a file for logging output.
        propagate: Whether records also reach the application's root handlers.
            Off by default so messages are not printed twice.

    Returns:
        The configured library logger.
    """
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(log_level)
    library_logger.propagate = propagate

    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    library_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            library_logger.addHandler(file_handler)
            library_logger.info(f"Logging to file: {log_file}")
        except OSError as e:
            library_logger.error(f"Failed to set up file logging to {log_file}: {e}", exc_info=True)

    library_logger.debug(f"Logging configured. Level={logging.getLevelName(log_level)}")
    return library_logger

def level_from_name(level_name: Optional[str], default: int = DEFAULT_LOG_LEVEL) -> int:
    """Maps a level name such as 'debug' to its logging constant."""
    if not level_name:
        return default
    level = logging.getLevelName(str(level_name).upper())
    return level if isinstance(level, int) else default

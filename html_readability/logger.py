"""
Logging configuration for the html_readability framework.
"""

import logging
import os
import sys
from typing import IO, Optional, Union


def _resolve_level(level: Optional[Union[int, str]]) -> Optional[int]:
    """Accept an int or a level name; unknown names mean INFO."""
    if level is None or isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _console_handlers(logger: logging.Logger) -> list[logging.StreamHandler]:
    # FileHandler subclasses StreamHandler, so exclude it explicitly
    return [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]


def setup_logger(
    name: str = "html_readability",
    level: Optional[Union[int, str]] = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[IO] = None
) -> logging.Logger:
    """
    Set up and return a logger instance.

    Args:
        name: Logger name
        level: Logging level, as an int or a level name (default: INFO).
               None leaves the level of an existing logger untouched.
        log_file: Optional file path for logging
        stream: Console stream (default: stdout)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    level = _resolve_level(level)

    # Format: timestamp - module - level - message
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if not logger.handlers:
        if level is None:
            level = logging.INFO

        # Console handler
        console_handler = logging.StreamHandler(stream or sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    elif stream is not None:
        set_console_stream(stream, name)

    if level is not None:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    # File handler (if specified and not attached yet)
    if log_file:
        path = os.path.abspath(log_file)
        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == path
                   for h in logger.handlers):
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logger.level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def set_console_stream(stream: IO, name: str = "html_readability") -> Optional[IO]:
    """
    Point the logger's console handler at another stream.

    Returns the previous stream so callers can restore it.
    """
    previous = None
    for handler in _console_handlers(logging.getLogger(name)):
        previous = handler.stream
        handler.setStream(stream)
    return previous


# Default logger instance, created once at import time
logger = setup_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get a child logger for a specific module.

    Child loggers (e.g. "html_readability.extractor") inherit the root
    logger's handlers and level, so each pipeline stage is visible in the
    output without extra config.

    Args:
        module_name: Name of the module (e.g., 'preprocessor', 'extractor')

    Returns:
        Child logger instance
    """
    return logging.getLogger(f"html_readability.{module_name}")

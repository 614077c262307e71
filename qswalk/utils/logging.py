"""Logging infrastructure for QSWalk.

This module provides a unified logging setup for the package. Incidence and
assembly modules create their loggers with ``setup_logger(__name__)``, which
attaches a console handler and an optional file handler.

Key features:
- Configurable log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- Console and file output support
- Thread-safe logger registry preventing duplicate handlers
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict
import threading

# Global logger registry to prevent duplicate handlers
_loggers: Dict[str, logging.Logger] = {}
_lock = threading.Lock()


def setup_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_type: str = "standard"
) -> logging.Logger:
    """Configure logger with console and optional file output.

    Args:
        name: Logger name (typically module name)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        format_type: Format type ('standard', 'detailed', 'simple')

    Returns:
        Configured logger instance

    Raises:
        ValueError: If level is invalid

    Example:
        >>> logger = setup_logger('qswalk.demoralization', level='DEBUG')
        >>> logger.info('Assembling Lindbladian')
    """
    with _lock:
        if name in _loggers:
            return _loggers[name]

        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f"Invalid log level: {level}")

        logger = logging.getLogger(name)
        logger.setLevel(numeric_level)

        if logger.handlers:
            logger.handlers.clear()

        formatter = _get_formatter(format_type)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(numeric_level)
        logger.addHandler(console_handler)

        if log_file:
            log_file = Path(log_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_file, mode='a')
                file_handler.setFormatter(_get_formatter('detailed'))
                file_handler.setLevel(numeric_level)
                logger.addHandler(file_handler)
            except (OSError, PermissionError) as e:
                logger.warning(f"Could not create file handler for {log_file}: {e}")

        logger.propagate = False

        _loggers[name] = logger

        return logger


def _get_formatter(format_type: str) -> logging.Formatter:
    """Get formatter based on type.

    Args:
        format_type: Type of format ('standard', 'detailed', 'simple')

    Returns:
        Logging formatter
    """
    formats = {
        'standard': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'detailed': '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
        'simple': '%(levelname)s - %(message)s'
    }

    format_string = formats.get(format_type, formats['standard'])
    return logging.Formatter(format_string)


def get_logger(name: str) -> logging.Logger:
    """Get existing logger or create new one with default settings.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if name in _loggers:
        return _loggers[name]
    return setup_logger(name)


def shutdown_logging() -> None:
    """Close handlers of every configured logger and clear the registry."""
    with _lock:
        for logger in _loggers.values():
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
        _loggers.clear()

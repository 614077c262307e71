"""Utilities for the QSWalk package.

This module contains common utilities used throughout the package:
- Logging infrastructure
- Custom exception hierarchy
- Configuration constants
- Validation helpers for adjacency matrices and operator blocks
"""

from .logging import setup_logger, get_logger, shutdown_logging
from .exceptions import (
    QSWalkError,
    ValidationError,
    InvalidArgumentError,
    InvalidVertexError,
    InvalidVertexSetError,
    DimensionMismatchError,
    MissingKeyError,
    ShapeMismatchError,
    TypeMismatchError,
)
from .config import Config, default_epsilon

__all__ = [
    "setup_logger",
    "get_logger",
    "shutdown_logging",
    "QSWalkError",
    "ValidationError",
    "InvalidArgumentError",
    "InvalidVertexError",
    "InvalidVertexSetError",
    "DimensionMismatchError",
    "MissingKeyError",
    "ShapeMismatchError",
    "TypeMismatchError",
    "Config",
    "default_epsilon",
]

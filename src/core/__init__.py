"""
Core module for cross-cutting concerns.

This module provides:
- Structured logging configuration
- Shared exception types
"""

from core.exceptions import PassionMatchError, StorageError
from core.logging import LoggerMixin, configure_from_settings, configure_logging, get_logger

__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LoggerMixin",
    "PassionMatchError",
    "StorageError",
]

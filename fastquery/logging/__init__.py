"""
Logging module for fastquery.

This module provides a simple logging interface
that integrates with application settings.

Limitations:
- Only console (stdout) logging is supported out of the box.
"""

import logging

from fastquery.logging.formatters import JsonFormatter
from fastquery.logging.manager import ensure_logger, get_logger, setup_logger

# Type alias for Python's standard logger
Logger = logging.Logger

__all__ = [
    "Logger",
    "get_logger",
    "ensure_logger",
    "setup_logger",
    "JsonFormatter",
]

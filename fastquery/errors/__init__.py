"""
Error handling module for fastquery.

This module provides the exception hierarchy and the FastAPI exception
handlers that turn those exceptions into error response envelopes.

Limitations:
- Error response structure is fixed; customization requires code changes.
- Only HTTP-style errors are supported (exceptions must inherit from AppError or be handled by FastAPI).
"""

from fastquery.errors.exceptions import (
    AppError,
    BadRequestError,
    DBError,
    ValidationError,
)
from fastquery.errors.handlers import register_exception_handlers
from fastquery.errors.manager import setup_errors

__all__ = [
    # Main setup function
    "setup_errors",
    # Handler registration
    "register_exception_handlers",
    # Exception classes
    "AppError",
    "ValidationError",
    "BadRequestError",
    "DBError",
]

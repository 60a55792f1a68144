"""
Error management functionality for FastAPI applications.

This module provides the entry point for configuring error handling
in a FastAPI application.
"""

from typing import Optional

from fastapi import FastAPI

from fastquery.config.base import BaseAppSettings
from fastquery.errors.handlers import register_exception_handlers
from fastquery.logging import Logger, ensure_logger


def setup_errors(
    app: FastAPI,
    settings: Optional[BaseAppSettings] = None,
    logger: Optional[Logger] = None,
) -> None:
    """
    Configure error handling for a FastAPI application.

    Registers exception handlers that convert exceptions into consistent
    API responses.

    Args:
        app: FastAPI application instance
        settings: Optional application settings
        logger: Optional logger for logging exceptions
    """
    log = ensure_logger(logger, __name__, settings)
    register_exception_handlers(app, logger=log)

"""
FastAPI application factory module.

This module configures FastAPI applications with error handling, the
database lifespan and the admin list endpoint.
"""

from typing import Optional

from fastapi import FastAPI

from fastquery.admin.router import create_admin_router
from fastquery.config import BaseAppSettings, get_settings
from fastquery.db.manager import setup_db
from fastquery.errors import setup_errors
from fastquery.logging import ensure_logger


def configure_app(app: FastAPI, settings: Optional[BaseAppSettings] = None) -> None:
    """
    Configure a FastAPI application.

    Args:
        app: The FastAPI application to configure
        settings: Optional application settings, if not provided will be loaded
                 from environment
    """
    app_settings = settings or get_settings()
    logger = ensure_logger(None, __name__, app_settings)

    app.title = app_settings.APP_NAME
    app.version = app_settings.VERSION
    app.debug = app_settings.DEBUG

    setup_errors(app, app_settings, logger)
    app.router.lifespan_context = setup_db(app_settings, logger)
    app.include_router(create_admin_router(app_settings))


def create_app(settings: Optional[BaseAppSettings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application.

    Example:
        ```bash
        uvicorn --factory fastquery.factory:create_app
        ```
    """
    app = FastAPI()
    configure_app(app, settings)
    return app

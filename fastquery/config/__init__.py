"""
Configuration module for fastquery.

This module provides:
- BaseAppSettings: The base class for application settings, supporting environment variable loading.
- Environment-specific settings (development, testing, production).
- get_settings: Factory for loading the correct settings class based on APP_ENV.

Example environment variables:

# Application
APP_NAME="fastquery"
APP_ENV="development"  # Options: development, testing, production
DEBUG=true

# Database configuration
DATABASE_URL="postgresql+asyncpg://<username>:<password>@<host>:<port>/<database_name>"
DB_ECHO=false
DB_POOL_SIZE=5

# Logging
LOG_LEVEL="INFO"
LOG_JSON_FORMAT=false

# List queries
QUERY_DEFAULT_LIMIT=10
QUERY_MAX_LIMIT=100
QUERY_DEFAULT_SORT_FIELD="created_at"
QUERY_DEFAULT_SORT_ORDER="desc"
QUERY_SOFT_DELETE_FIELD="is_deleted"
"""

from .base import BaseAppSettings
from .development import DevelopmentSettings
from .production import ProductionSettings
from .settings import get_settings
from .testing import TestingSettings

__all__ = [
    "BaseAppSettings",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestingSettings",
    "get_settings",
]

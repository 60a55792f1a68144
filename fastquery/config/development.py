"""
Development environment specific settings.
"""

from .base import BaseAppSettings


class DevelopmentSettings(BaseAppSettings):
    """
    Settings class for development environment.

    Attributes:
        DEBUG: Enabled for verbose logging
        DATABASE_URL: Local SQLite database through aiosqlite
    """

    DEBUG: bool = True
    DATABASE_URL: str = "sqlite+aiosqlite:///./fastquery.db"

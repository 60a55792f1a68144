"""
Testing environment specific settings.
"""

from .base import BaseAppSettings


class TestingSettings(BaseAppSettings):
    """
    Settings class for testing environment.

    Attributes:
        DEBUG: Set to True for detailed test output
        DATABASE_URL: SQLite database file used by the test run
    """

    DEBUG: bool = True
    DATABASE_URL: str = "sqlite+aiosqlite:///./test.db"

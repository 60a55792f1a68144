"""
Base configuration module for fastquery.

This module provides the base settings class that the environment-specific
settings classes inherit from. It covers application, database, logging
and list-query defaults.
"""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class BaseAppSettings(BaseSettings):
    """
    Base settings class for application configuration.

    Attributes:
        APP_NAME: The name of the application
        DEBUG: Flag to enable/disable debug mode
        VERSION: Application version string
        DATABASE_URL: Database connection URL
        DB_ECHO: Enable SQL query logging (echo)
        DB_POOL_SIZE: Connection pool size for the database
        LOG_LEVEL: Logging level name
        LOG_JSON_FORMAT: Emit logs as JSON lines
        QUERY_DEFAULT_LIMIT: Page size used when a request gives none
        QUERY_MAX_LIMIT: Optional upper bound for the requested page size
        QUERY_DEFAULT_SORT_FIELD: Field used when a request gives no usable sort
        QUERY_DEFAULT_SORT_ORDER: Order used with the default sort field
        QUERY_SOFT_DELETE_FIELD: Boolean field flagging soft-deleted records
    """

    APP_NAME: str = Field(default="fastquery")
    DEBUG: bool = Field(default=False)
    VERSION: str = Field(default="0.1.0")

    # Database configuration
    DATABASE_URL: Optional[str] = Field(
        default=None, description="Database connection URL"
    )
    DB_ECHO: bool = Field(default=False, description="Enable SQL query logging (echo)")
    DB_POOL_SIZE: int = Field(
        default=5, description="Connection pool size for the database"
    )

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level name")
    LOG_JSON_FORMAT: bool = Field(default=False, description="Emit logs as JSON")

    # List query configuration
    QUERY_DEFAULT_LIMIT: int = Field(
        default=10, ge=1, description="Page size used when a request gives none"
    )
    QUERY_MAX_LIMIT: Optional[int] = Field(
        default=None, ge=1, description="Optional upper bound for the page size"
    )
    QUERY_DEFAULT_SORT_FIELD: str = Field(
        default="created_at", description="Default sort field"
    )
    QUERY_DEFAULT_SORT_ORDER: str = Field(
        default="desc", description='Default sort order: "asc" or "desc"'
    )
    QUERY_SOFT_DELETE_FIELD: str = Field(
        default="is_deleted", description="Boolean soft-delete flag field"
    )

    @field_validator("QUERY_DEFAULT_SORT_ORDER", mode="before")
    def validate_sort_order(cls, value):
        """Normalize the default sort order and reject anything but asc/desc."""
        normalized = str(value).strip().lower()
        if normalized not in ("asc", "desc"):
            raise ValueError(
                f"QUERY_DEFAULT_SORT_ORDER must be 'asc' or 'desc', got: {value}"
            )
        return normalized

    @field_validator("DATABASE_URL", mode="before")
    def validate_database_url(cls, value):
        """
        Ensure DATABASE_URL uses asyncpg for PostgreSQL connections.
        """
        if (
            value
            and value.startswith("postgresql://")
            and not value.startswith("postgresql+asyncpg://")
        ):
            raise ValueError(
                "DATABASE_URL must start with 'postgresql+asyncpg://' for asyncpg driver. "
                "You provided a URL starting with 'postgresql://'. "
                "Please update your DATABASE_URL to use the correct format."
            )
        return value

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

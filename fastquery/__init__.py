"""
fastquery - search, filter, sort and paginate list endpoints with FastAPI and SQLAlchemy.

Usage:
    from fastapi import Depends
    from fastquery import BuiltQuery, QueryParams, ResourceQueryConfig

    config = ResourceQueryConfig(
        filterable_fields=["name", "email"],
        searchable_fields=["name", "email"],
    )

    @app.get("/admins")
    async def list_admins(query: BuiltQuery = Depends(QueryParams(config))):
        ...
"""

__version__ = "0.1.0"

from fastquery.api import (
    BuiltQuery,
    FieldSpec,
    QueryParams,
    QueryResult,
    ResourceQueryConfig,
    build_query,
    paginate,
)
from fastquery.config import BaseAppSettings, get_settings
from fastquery.errors import AppError, ValidationError, setup_errors
from fastquery.logging import get_logger

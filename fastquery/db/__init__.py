"""
Database integration module for fastquery: public API

Features:
- Async SQLAlchemy integration (PostgreSQL+asyncpg or SQLite+aiosqlite)
- Compilation of list query descriptors to SQLAlchemy expressions
- Repository running paginated list queries
- FastAPI dependency for session access and lifespan management

Limitations:
- Only async SQLAlchemy is supported (no sync engine/session)
- No migration helpers
"""

from fastquery.db.base import Base, BaseModel, metadata
from fastquery.db.compiler import compile_order_by, compile_predicate
from fastquery.db.engine import init_db, shutdown_db
from fastquery.db.manager import get_db, setup_db
from fastquery.db.repository import QueryRepository

__all__ = [
    "init_db",
    "shutdown_db",
    "setup_db",
    "get_db",
    "QueryRepository",
    "compile_predicate",
    "compile_order_by",
    "Base",
    "BaseModel",
    "metadata",
]

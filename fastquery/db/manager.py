from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator, Callable, Optional

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession

import fastquery.db.engine as db_engine
from fastquery.config.base import BaseAppSettings
from fastquery.db.engine import init_db, shutdown_db
from fastquery.errors.exceptions import AppError, DBError
from fastquery.logging import Logger, ensure_logger, get_logger

default_logger = get_logger(__name__)


def setup_db(
    settings: BaseAppSettings,
    logger: Optional[Logger] = None,
) -> Callable[[FastAPI], AsyncIterator[None]]:
    """
    Build the database lifespan for a FastAPI application.

    - On startup: initialize AsyncEngine and sessionmaker
    - On shutdown: dispose engine

    Example:
        ```python
        app = FastAPI(lifespan=setup_db(settings))
        ```
    """
    log = ensure_logger(logger, __name__, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await init_db(settings, log)
        log.info("Database engine initialized")
        try:
            yield
        finally:
            await shutdown_db(log)
            log.info("Database engine disposed")

    return lifespan


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.
    """
    if db_engine.SessionLocal is None:
        raise DBError(message="Database not initialized")

    async with db_engine.SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except AppError:
            await session.rollback()
            raise
        except Exception as e:
            await session.rollback()
            default_logger.error(f"Database session error: {e}")
            raise DBError(message=str(e), details={"error": str(e)})

"""
Tests for database engine lifecycle and the session dependency.
"""
import pytest
from fastapi import FastAPI

import fastquery.db.engine as db_engine
from fastquery.config import BaseAppSettings, TestingSettings
from fastquery.db.engine import init_db, shutdown_db
from fastquery.db.manager import get_db, setup_db
from fastquery.errors import BadRequestError, DBError


@pytest.fixture
def settings(tmp_path):
    return TestingSettings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'engine.db'}")


@pytest.mark.asyncio
async def test_init_db_requires_url():
    with pytest.raises(DBError):
        await init_db(BaseAppSettings())


@pytest.mark.asyncio
async def test_init_and_shutdown(settings):
    await init_db(settings)
    assert db_engine.engine is not None
    assert db_engine.SessionLocal is not None

    await shutdown_db()
    assert db_engine.engine is None
    assert db_engine.SessionLocal is None


@pytest.mark.asyncio
async def test_lifespan_manages_engine(settings):
    lifespan = setup_db(settings)
    async with lifespan(FastAPI()):
        assert db_engine.SessionLocal is not None
    assert db_engine.engine is None


@pytest.mark.asyncio
async def test_get_db_without_engine():
    with pytest.raises(DBError):
        await get_db().__anext__()


@pytest.mark.asyncio
async def test_get_db_reraises_app_errors(settings):
    await init_db(settings)
    try:
        gen = get_db()
        session = await gen.__anext__()
        assert session is not None
        with pytest.raises(BadRequestError):
            await gen.athrow(BadRequestError("bad filter"))
    finally:
        await shutdown_db()


@pytest.mark.asyncio
async def test_get_db_wraps_other_errors(settings):
    await init_db(settings)
    try:
        gen = get_db()
        await gen.__anext__()
        with pytest.raises(DBError) as exc_info:
            await gen.athrow(RuntimeError("lost connection"))
        assert exc_info.value.message == "lost connection"
    finally:
        await shutdown_db()

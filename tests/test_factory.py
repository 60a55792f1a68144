"""
Tests for the factory module.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fastquery.config import TestingSettings
from fastquery.errors import AppError
from fastquery.factory import configure_app, create_app


@pytest.fixture
def settings(tmp_path):
    return TestingSettings(
        APP_NAME="Admin API",
        VERSION="2.0.0",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}",
    )


def test_create_app_sets_metadata(settings):
    app = create_app(settings)
    assert isinstance(app, FastAPI)
    assert app.title == "Admin API"
    assert app.version == "2.0.0"
    assert app.debug is True


def test_admin_route_is_registered(settings):
    app = create_app(settings)
    assert "/admins" in app.openapi()["paths"]


def test_configure_app_registers_error_handlers(settings):
    app = FastAPI()
    configure_app(app, settings)

    @app.get("/boom")
    def boom():
        raise AppError(message="teapot", code="TEAPOT", status_code=418)

    with TestClient(app) as client:
        response = client.get("/boom")
    assert response.status_code == 418
    assert response.json()["errors"][0]["code"] == "TEAPOT"


def test_configure_app_loads_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("APP_NAME", "FromEnv")
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'env.db'}")
    app = FastAPI()
    configure_app(app)
    assert app.title == "FromEnv"

from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from fastquery.admin.models import Admin
from fastquery.api.builder import ResourceQueryConfig
from fastquery.db.base import Base

ADMIN_ROWS = [
    # id, name, email, contact_number, role, is_deleted, created_at
    (1, "Sam Carter", "sam@example.com", "555-0101", "admin", False, datetime(2026, 1, 1, 9, 0)),
    (2, "Samantha Lee", "slee@example.com", "555-0102", "owner", False, datetime(2026, 1, 2, 9, 0)),
    (3, "Alex Kim", "alex@sample.org", "555-0103", "admin", False, datetime(2026, 1, 3, 9, 0)),
    (4, "Jordan Sam", "jordan@example.com", None, "admin", True, datetime(2026, 1, 4, 9, 0)),
    (5, "Riley 100%", "riley@example.com", "555-0105", "support", False, datetime(2026, 1, 5, 9, 0)),
]


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Settings are read from the environment; keep tests isolated from it
    for name in (
        "APP_ENV",
        "APP_NAME",
        "DEBUG",
        "DATABASE_URL",
        "LOG_LEVEL",
        "LOG_JSON_FORMAT",
        "QUERY_DEFAULT_LIMIT",
        "QUERY_MAX_LIMIT",
        "QUERY_DEFAULT_SORT_FIELD",
        "QUERY_DEFAULT_SORT_ORDER",
        "QUERY_SOFT_DELETE_FIELD",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def admin_config():
    """Query configuration mirroring the admin resource."""
    return ResourceQueryConfig(
        filterable_fields=["name", "email"],
        searchable_fields=["name", "email"],
    )


def seed_admins(url: str) -> None:
    """Create the schema and insert ADMIN_ROWS using a sync engine."""
    engine = create_engine(url)
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(
            [
                Admin(
                    id=row[0],
                    name=row[1],
                    email=row[2],
                    contact_number=row[3],
                    role=row[4],
                    is_deleted=row[5],
                    created_at=row[6],
                    updated_at=row[6],
                )
                for row in ADMIN_ROWS
            ]
        )
        session.commit()
    engine.dispose()


@pytest.fixture
def db_path(tmp_path):
    """Path of a seeded SQLite database file."""
    path = tmp_path / "admins.db"
    seed_admins(f"sqlite:///{path}")
    return path

"""Shared pytest fixtures.

Unit tests drive models through a MagicMock connection carrying a real
dialect object, so synthesized SQL can be asserted exactly. Integration tests
use an in-memory SQLite database through the real SQLAlchemy connection.
"""

from __future__ import annotations

import os

# Keep test runs independent of any developer .env file.
os.environ.setdefault("TGW_DATABASE_URI", "sqlite://")
os.environ.setdefault("TGW_LOG_LEVEL", "WARNING")

from typing import Generator, List
from unittest.mock import MagicMock

import pytest
import sqlalchemy as sa
from sqlalchemy.pool import StaticPool

from table_gateway.infrastructure.sql import MySQLDialect, SQLiteDialect
from table_gateway.io.connection import Connection

USER_COLUMNS: List[str] = ["id", "user_name", "status", "email", "age"]


def make_mock_db(dialect=None, columns: List[str] = USER_COLUMNS) -> MagicMock:
    """Create a mock connection whose describe query reports ``columns``."""
    db = MagicMock()
    db.dialect = dialect or MySQLDialect()
    db.query_all.return_value = [{"Field": column} for column in columns]
    return db


@pytest.fixture
def mock_db() -> MagicMock:
    """Mock MySQL connection with the user table's columns."""
    return make_mock_db()


@pytest.fixture
def mock_db_factory():
    """Factory for mock connections with a chosen dialect or column set."""
    return make_mock_db


@pytest.fixture
def sqlite_engine() -> Generator[sa.Engine, None, None]:
    """In-memory SQLite engine shared across connections via StaticPool."""
    engine = sa.create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        conn.execute(
            sa.text(
                """
                CREATE TABLE user_profile (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_name TEXT NOT NULL,
                    status TEXT NOT NULL,
                    email TEXT,
                    age INTEGER
                )
                """
            )
        )
        conn.execute(
            sa.text("CREATE TABLE audit_note (note TEXT NOT NULL, author TEXT)")
        )
    yield engine
    engine.dispose()


@pytest.fixture
def sqlite_db(sqlite_engine: sa.Engine) -> Connection:
    """Real connection over the in-memory SQLite engine."""
    conn = Connection(sqlite_engine)
    assert isinstance(conn.dialect, SQLiteDialect)
    return conn

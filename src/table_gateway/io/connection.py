"""
SQLAlchemy-backed database connection.

Implements the execution contract models depend on: ``query``, ``query_row``
and ``query_all``, each taking SQL text with ``:name`` placeholders and a
bind map. Every call runs in its own ``engine.begin()`` block, so writes are
committed on success and rolled back on error. Nothing spans calls.

Logging never includes bind values, only their names.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Union

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from table_gateway.infrastructure.sql.dialects import Dialect, get_dialect
from table_gateway.infrastructure.sql.results import Row
from table_gateway.utils.logging import get_logger

logger = get_logger(__name__)


def _is_insert(sql: str) -> bool:
    return sql.lstrip()[:6].upper() == "INSERT"


class ConnectionLike(Protocol):
    """Execution contract consumed by models."""

    dialect: Dialect

    def query(
        self, sql: str, binds: Optional[Mapping[str, Any]] = None
    ) -> Union[List[Row], int]: ...

    def query_row(
        self, sql: str, binds: Optional[Mapping[str, Any]] = None
    ) -> Optional[Row]: ...

    def query_all(
        self, sql: str, binds: Optional[Mapping[str, Any]] = None
    ) -> List[Row]: ...


class Connection:
    """
    Execute parametrized SQL through a SQLAlchemy engine.

    Usage:
        conn = create_connection("sqlite:///app.db")
        new_id = conn.query("INSERT INTO user (name) VALUES (:name)", {"name": "bob"})
        row = conn.query_row("SELECT * FROM user WHERE id = :id", {"id": new_id})
        rows = conn.query_all("SELECT * FROM user")
    """

    def __init__(self, engine: Engine, dialect: Optional[Dialect] = None):
        """
        Initialize the connection.

        Args:
            engine: SQLAlchemy engine. The connection does not own its pool.
            dialect: SQL dialect; derived from the engine when omitted
        """
        self.engine = engine
        self.dialect = dialect or get_dialect(engine.dialect.name)

    def _execute(self, conn: sa.Connection, sql: str, binds: Optional[Mapping[str, Any]]):
        params: Dict[str, Any] = dict(binds or {})
        logger.debug(
            "connection.query",
            dialect=self.dialect.name,
            sql=sql,
            bind_names=sorted(params),
        )
        try:
            return conn.execute(sa.text(sql), params)
        except SQLAlchemyError as e:
            logger.error(
                "connection.query.failed",
                dialect=self.dialect.name,
                sql=sql,
                error=str(e.orig) if getattr(e, "orig", None) else str(e),
            )
            raise

    def query(
        self, sql: str, binds: Optional[Mapping[str, Any]] = None
    ) -> Union[List[Row], int]:
        """
        Execute any statement.

        Returns:
            Rows for row-returning statements; for INSERT the new row id when
            the driver reports one, otherwise the affected row count
        """
        with self.engine.begin() as conn:
            result = self._execute(conn, sql, binds)
            if result.returns_rows:
                return [dict(row) for row in result.mappings()]
            if _is_insert(sql) and result.lastrowid:
                return result.lastrowid
            return result.rowcount

    def query_row(
        self, sql: str, binds: Optional[Mapping[str, Any]] = None
    ) -> Optional[Row]:
        """Execute a query and return its first row, or None."""
        with self.engine.begin() as conn:
            row = self._execute(conn, sql, binds).mappings().first()
            return dict(row) if row is not None else None

    def query_all(
        self, sql: str, binds: Optional[Mapping[str, Any]] = None
    ) -> List[Row]:
        """Execute a query and return every row."""
        with self.engine.begin() as conn:
            return [dict(row) for row in self._execute(conn, sql, binds).mappings()]

    def dispose(self) -> None:
        """Release pooled DBAPI connections held by the engine."""
        self.engine.dispose()


def create_connection(url: str, **engine_kwargs: Any) -> Connection:
    """
    Create a Connection for a SQLAlchemy URL.

    Args:
        url: SQLAlchemy database URL
        **engine_kwargs: Passed through to ``sqlalchemy.create_engine``
    """
    engine = sa.create_engine(url, **engine_kwargs)
    return Connection(engine)

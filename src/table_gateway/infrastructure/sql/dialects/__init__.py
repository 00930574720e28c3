"""SQL dialect implementations and lookup."""

from typing import Dict, Type

from table_gateway.exceptions import UnsupportedDialectError

from .base import Dialect, case_order_by
from .mysql import MySQLDialect
from .postgresql import PostgreSQLDialect
from .sqlite import SQLiteDialect

_DIALECTS: Dict[str, Type] = {
    "mysql": MySQLDialect,
    "mariadb": MySQLDialect,
    "postgresql": PostgreSQLDialect,
    "sqlite": SQLiteDialect,
}


def get_dialect(name: str) -> Dialect:
    """
    Return a dialect instance for a SQLAlchemy dialect name.

    Raises:
        UnsupportedDialectError: If no dialect is registered under ``name``.
    """
    try:
        return _DIALECTS[name.lower()]()
    except KeyError:
        raise UnsupportedDialectError(name) from None


__all__ = [
    "Dialect",
    "case_order_by",
    "get_dialect",
    "MySQLDialect",
    "PostgreSQLDialect",
    "SQLiteDialect",
]

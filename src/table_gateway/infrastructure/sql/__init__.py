"""
SQL module for centralized SQL generation.

This module provides reusable utilities for building parametrized SQL
statements with proper identifier quoting, schema qualification and
dialect-specific syntax, plus shaping of the rows those statements return.
"""

from .core.identifier import qualify_table, quote_identifier
from .core.parameters import build_indexed_params, is_numeric, normalize_binds
from .core.statement import Statement
from .dialects import (
    Dialect,
    MySQLDialect,
    PostgreSQLDialect,
    SQLiteDialect,
    get_dialect,
)
from .operations import DeleteBuilder, InsertBuilder, SelectBuilder, UpdateBuilder
from .results import shape_row, shape_rows

__all__ = [
    "quote_identifier",
    "qualify_table",
    "build_indexed_params",
    "is_numeric",
    "normalize_binds",
    "Statement",
    "Dialect",
    "MySQLDialect",
    "PostgreSQLDialect",
    "SQLiteDialect",
    "get_dialect",
    "InsertBuilder",
    "DeleteBuilder",
    "UpdateBuilder",
    "SelectBuilder",
    "shape_row",
    "shape_rows",
]

"""
SQLite-specific SQL dialect implementation.
"""

from typing import List, Optional

from ..core.identifier import qualify_table, quote_identifier
from ..core.statement import Statement
from .base import case_order_by


class SQLiteDialect:
    """SQLite SQL dialect implementation."""

    name = "sqlite"
    insert_returns_key = False

    def quote(self, identifier: str) -> str:
        """Quote an identifier using ANSI double quotes."""
        return quote_identifier(identifier, dialect=self.name)

    def qualify(self, table: str, schema: Optional[str] = None) -> str:
        """Create a table reference; ``schema`` is an attached database name."""
        return qualify_table(table, schema, dialect=self.name)

    def describe_table(self, table: str, schema: Optional[str] = None) -> Statement:
        """
        Build the column introspection query using ``pragma_table_info``.

        Rows carry a ``Field`` attribute, one per column, in definition order.
        """
        binds = {"table_name": table}
        if schema:
            source = "pragma_table_info(:table_name, :table_schema)"
            binds["table_schema"] = schema
        else:
            source = "pragma_table_info(:table_name)"
        return Statement(f"SELECT name AS Field FROM {source} ORDER BY cid", binds)

    def order_by_values(self, column: str, placeholders: List[str]) -> str:
        """Order rows by the position of ``column`` in the placeholder list."""
        return case_order_by(column, placeholders)

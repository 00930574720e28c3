"""
PostgreSQL-specific SQL dialect implementation.

Provides PostgreSQL identifier quoting, schema introspection through
information_schema, and ordering by an explicit value list.
"""

from typing import List, Optional

from ..core.identifier import qualify_table, quote_identifier
from ..core.statement import Statement
from .base import case_order_by


class PostgreSQLDialect:
    """PostgreSQL SQL dialect implementation."""

    name = "postgresql"
    # lastrowid is not available through psycopg; inserts use RETURNING
    insert_returns_key = True

    def quote(self, identifier: str) -> str:
        """Quote an identifier using PostgreSQL syntax (double quotes)."""
        return quote_identifier(identifier, dialect=self.name)

    def qualify(self, table: str, schema: Optional[str] = None) -> str:
        """Create a fully qualified table reference."""
        return qualify_table(table, schema, dialect=self.name)

    def describe_table(self, table: str, schema: Optional[str] = None) -> Statement:
        """
        Build the column introspection query for a table.

        Rows carry a ``Field`` attribute, one per column, in definition order.
        Without a schema the search is limited to ``current_schema()``.

        Args:
            table: Table name
            schema: Optional schema name

        Returns:
            Statement selecting ``column_name AS "Field"``
        """
        binds = {"table_name": table}
        if schema:
            schema_clause = "table_schema = :table_schema"
            binds["table_schema"] = schema
        else:
            schema_clause = "table_schema = current_schema()"
        sql = (
            'SELECT column_name AS "Field" FROM information_schema.columns '
            f"WHERE table_name = :table_name AND {schema_clause} "
            "ORDER BY ordinal_position"
        )
        return Statement(sql, binds)

    def order_by_values(self, column: str, placeholders: List[str]) -> str:
        """Order rows by the position of ``column`` in the placeholder list."""
        return case_order_by(column, placeholders)

"""
MySQL-specific SQL dialect implementation.
"""

from typing import List, Optional

from ..core.identifier import qualify_table, quote_identifier
from ..core.statement import Statement


class MySQLDialect:
    """MySQL SQL dialect implementation (backtick quoting, DESCRIBE, FIELD())."""

    name = "mysql"
    insert_returns_key = False

    def quote(self, identifier: str) -> str:
        """Quote an identifier using MySQL syntax (backticks)."""
        return quote_identifier(identifier, dialect=self.name)

    def qualify(self, table: str, schema: Optional[str] = None) -> str:
        """Create a fully qualified table reference."""
        return qualify_table(table, schema, dialect=self.name)

    def describe_table(self, table: str, schema: Optional[str] = None) -> Statement:
        """``DESCRIBE`` returns one row per column with a ``Field`` attribute."""
        return Statement(f"DESCRIBE {self.qualify(table, schema)}")

    def order_by_values(self, column: str, placeholders: List[str]) -> str:
        """
        Order rows by the position of ``column`` in the placeholder list.

        Examples:
            >>> MySQLDialect().order_by_values("`id`", [":id_0", ":id_1"])
            'FIELD(`id`, :id_0, :id_1)'
        """
        return f"FIELD({column}, {', '.join(placeholders)})"

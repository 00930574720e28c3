"""
SQL INSERT statement builder.
"""

from typing import Any, Mapping, Optional

from ..core.parameters import build_field_params
from ..core.statement import Statement
from ..dialects.base import Dialect


class InsertBuilder:
    """
    High-level builder for INSERT statements.

    Example:
        >>> from table_gateway.infrastructure.sql import InsertBuilder, MySQLDialect
        >>> builder = InsertBuilder(MySQLDialect())
        >>> stmt = builder.insert(None, "user", {"name": "ueaner", "age": 28})
        >>> print(stmt.sql)
        INSERT INTO `user` (`name`, `age`) VALUES (:name, :age)
        >>> stmt.binds
        {'name': 'ueaner', 'age': 28}
    """

    def __init__(self, dialect: Dialect):
        """
        Initialize the InsertBuilder.

        Args:
            dialect: SQL dialect to use for statement generation
        """
        self.dialect = dialect

    def insert(
        self,
        schema: Optional[str],
        table: str,
        fields: Mapping[str, Any],
        returning: Optional[str] = None,
    ) -> Optional[Statement]:
        """
        Build an INSERT statement with one placeholder per field.

        Args:
            schema: Schema name (optional)
            table: Table name
            fields: Column name to value mapping
            returning: Column to return from the inserted row (``RETURNING``)

        Returns:
            Statement, or None when ``fields`` is empty
        """
        if not fields:
            return None

        placeholders, binds = build_field_params(fields)
        qualified_table = self.dialect.qualify(table, schema)
        quoted_cols = ", ".join(self.dialect.quote(c) for c in fields)
        values = ", ".join(placeholders)
        sql = f"INSERT INTO {qualified_table} ({quoted_cols}) VALUES ({values})"
        if returning:
            sql = f"{sql} RETURNING {self.dialect.quote(returning)}"
        return Statement(sql, binds)

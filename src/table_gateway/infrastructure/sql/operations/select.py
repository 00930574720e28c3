"""
SQL SELECT statement builders.

Covers condition-based selects, column-equality lookups and bulk primary-key
lookups that preserve the requested id order in SQL.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..core.identifier import quote_column_list
from ..core.parameters import (
    bind_name,
    build_indexed_params,
    normalize_binds,
    placeholder,
)
from ..core.statement import Condition, Statement, normalize_condition
from ..dialects.base import Dialect

FieldList = Union[str, Sequence[str]]


class SelectBuilder:
    """
    Builder for SELECT statements.

    ``fields`` arguments accept either a raw select-list string (used as-is)
    or a sequence of column names (quoted and joined).

    Example:
        >>> from table_gateway.infrastructure.sql import MySQLDialect
        >>> builder = SelectBuilder(MySQLDialect())
        >>> stmt = builder.select_by_ids(None, "user", "id", ["id", "name"], [5, 3, 9])
        >>> print(stmt.sql)
        SELECT `id`, `name` FROM `user` WHERE `id` IN (:id_0, :id_1, :id_2) ORDER BY FIELD(`id`, :id_0, :id_1, :id_2) LIMIT 3
    """

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def select_list(self, fields: FieldList) -> str:
        """Render the select list for ``fields``."""
        if isinstance(fields, str):
            return fields
        return quote_column_list(fields, self.dialect.name)

    def select(
        self,
        schema: Optional[str],
        table: str,
        primary_key: str,
        fields: FieldList,
        condition: Condition = None,
        binds: Optional[Mapping[str, Any]] = None,
    ) -> Statement:
        """
        Build ``SELECT <fields> FROM <table>[ WHERE <condition>]``.

        Numeric conditions become a bound primary-key equality; a falsy
        non-numeric condition selects every row.
        """
        where, extra = normalize_condition(
            condition, primary_key, self.dialect.quote(primary_key)
        )
        params = normalize_binds(binds)
        params.update(extra)

        sql = f"SELECT {self.select_list(fields)} FROM {self.dialect.qualify(table, schema)}"
        if where:
            sql = f"{sql} WHERE {where}"
        return Statement(sql, params)

    def select_by_columns(
        self,
        schema: Optional[str],
        table: str,
        fields: FieldList,
        columns: Sequence[str],
        values: Sequence[Any],
    ) -> Statement:
        """
        Build a select matching each column to its value with ``AND``.

        A column repeated in ``columns`` gets a suffixed placeholder so every
        placeholder keeps its own bind entry.

        Example:
            >>> from table_gateway.infrastructure.sql import SQLiteDialect
            >>> stmt = SelectBuilder(SQLiteDialect()).select_by_columns(
            ...     None, "user", "*", ["user_name", "status"], ["bob", "active"]
            ... )
            >>> print(stmt.sql)
            SELECT * FROM "user" WHERE "user_name" = :user_name AND "status" = :status
        """
        if len(columns) != len(values):
            raise ValueError("columns and values must have the same length")

        params: Dict[str, Any] = {}
        predicates: List[str] = []
        for position, (column, value) in enumerate(zip(columns, values)):
            name = bind_name(column, position, params)
            params[name] = value
            predicates.append(f"{self.dialect.quote(column)} = {placeholder(name)}")

        sql = (
            f"SELECT {self.select_list(fields)} FROM {self.dialect.qualify(table, schema)} "
            f"WHERE {' AND '.join(predicates)}"
        )
        return Statement(sql, params)

    def select_by_ids(
        self,
        schema: Optional[str],
        table: str,
        primary_key: str,
        fields: FieldList,
        ids: Sequence[Any],
    ) -> Optional[Statement]:
        """
        Build a primary-key ``IN`` select ordered by the given id list.

        Returns:
            Statement, or None when ``ids`` is empty
        """
        if not ids:
            return None

        placeholders, params = build_indexed_params(primary_key, list(ids))
        quoted_key = self.dialect.quote(primary_key)
        order_by = self.dialect.order_by_values(quoted_key, placeholders)

        sql = (
            f"SELECT {self.select_list(fields)} FROM {self.dialect.qualify(table, schema)} "
            f"WHERE {quoted_key} IN ({', '.join(placeholders)}) "
            f"ORDER BY {order_by} LIMIT {len(placeholders)}"
        )
        return Statement(sql, params)

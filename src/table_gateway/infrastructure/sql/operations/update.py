"""
SQL UPDATE statement builder.
"""

from typing import Any, List, Mapping, Optional

from ..core.parameters import bind_name, normalize_binds, placeholder
from ..core.statement import (
    Condition,
    Statement,
    is_empty_condition,
    normalize_condition,
)
from ..dialects.base import Dialect


class UpdateBuilder:
    """
    Builder for UPDATE statements with automatic parameter binding.

    Each field is assigned as ``<field> = :<field>`` unless the caller already
    supplied a bind under that field's name. Such fields are left out of the
    SET clause entirely, so a caller can pre-bind a value it references from
    its own condition without it being assigned or bound twice.

    Example:
        >>> from table_gateway.infrastructure.sql import MySQLDialect
        >>> builder = UpdateBuilder(MySQLDialect())
        >>> stmt = builder.update(
        ...     None, "user", "id",
        ...     {"name": "jack", "email": ":email"},
        ...     "created_at = :created_at",
        ...     {":email": "mail@domain.com", ":created_at": "2015-10-27"},
        ... )
        >>> print(stmt.sql)
        UPDATE `user` SET `name` = :name WHERE created_at = :created_at
    """

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def update(
        self,
        schema: Optional[str],
        table: str,
        primary_key: str,
        fields: Mapping[str, Any],
        condition: Condition,
        binds: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Statement]:
        """
        Build ``UPDATE <table> SET <assignments> WHERE <condition>``.

        Args:
            schema: Schema name (optional)
            table: Table name
            primary_key: Primary key column used for numeric conditions
            fields: Column name to value mapping
            condition: Primary key value or raw predicate string
            binds: Caller binds; their keys suppress auto-binding of fields

        Returns:
            Statement, or None when fields or condition are empty, or when
            every field was suppressed by a caller bind
        """
        if not fields or is_empty_condition(condition):
            return None

        params = normalize_binds(binds)
        prebound = set(params)
        assignments: List[str] = []
        for position, (field, value) in enumerate(fields.items()):
            if field in prebound:
                continue
            name = bind_name(field, position, params)
            params[name] = value
            assignments.append(f"{self.dialect.quote(field)} = {placeholder(name)}")

        if not assignments:
            return None

        where, extra = normalize_condition(
            condition, primary_key, self.dialect.quote(primary_key)
        )
        params.update(extra)

        sql = (
            f"UPDATE {self.dialect.qualify(table, schema)} "
            f"SET {', '.join(assignments)} WHERE {where}"
        )
        return Statement(sql, params)

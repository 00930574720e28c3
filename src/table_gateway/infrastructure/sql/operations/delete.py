"""
SQL DELETE statement builder.
"""

from typing import Any, Mapping, Optional

from ..core.parameters import normalize_binds
from ..core.statement import (
    Condition,
    Statement,
    is_empty_condition,
    normalize_condition,
)
from ..dialects.base import Dialect


class DeleteBuilder:
    """Builder for DELETE statements. Unconditional deletes are never emitted."""

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def delete(
        self,
        schema: Optional[str],
        table: str,
        primary_key: str,
        condition: Condition,
        binds: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Statement]:
        """
        Build ``DELETE FROM <table> WHERE <condition>``.

        Args:
            schema: Schema name (optional)
            table: Table name
            primary_key: Primary key column used for numeric conditions
            condition: Primary key value or raw predicate string
            binds: Binds referenced by a raw predicate

        Returns:
            Statement, or None when ``condition`` is empty
        """
        if is_empty_condition(condition):
            return None

        where, extra = normalize_condition(
            condition, primary_key, self.dialect.quote(primary_key)
        )
        params = normalize_binds(binds)
        params.update(extra)

        sql = f"DELETE FROM {self.dialect.qualify(table, schema)} WHERE {where}"
        return Statement(sql, params)

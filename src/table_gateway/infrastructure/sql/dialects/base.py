"""
Dialect protocol shared by statement builders and the connection adapter.
"""

from typing import List, Optional, Protocol

from ..core.statement import Statement


class Dialect(Protocol):
    """Protocol for SQL dialects."""

    name: str
    insert_returns_key: bool

    def quote(self, identifier: str) -> str: ...
    def qualify(self, table: str, schema: Optional[str] = None) -> str: ...
    def describe_table(self, table: str, schema: Optional[str] = None) -> Statement: ...
    def order_by_values(self, column: str, placeholders: List[str]) -> str: ...


def case_order_by(column: str, placeholders: List[str]) -> str:
    """
    Portable ORDER BY expression ranking rows by their position in a value list.

    Examples:
        >>> case_order_by('"id"', [":id_0", ":id_1"])
        'CASE "id" WHEN :id_0 THEN 0 WHEN :id_1 THEN 1 END'
    """
    whens = " ".join(
        f"WHEN {value} THEN {position}" for position, value in enumerate(placeholders)
    )
    return f"CASE {column} {whens} END"

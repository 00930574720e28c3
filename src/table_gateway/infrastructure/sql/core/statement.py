"""
Statement value type and WHERE-condition normalization shared by builders.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .parameters import coerce_number, is_bind_name, is_numeric, placeholder

Condition = Union[int, float, str, None]


@dataclass(frozen=True)
class Statement:
    """
    A synthesized SQL statement and its bind map.

    Attributes:
        sql: SQL text using ``:name`` placeholders.
        binds: Placeholder name (without colon) to value.
    """

    sql: str
    binds: Dict[str, Any] = field(default_factory=dict)


def primary_key_bind_name(primary_key: str) -> str:
    """Bind name used when a condition is rewritten to a primary-key equality."""
    if not is_bind_name(primary_key):
        return "where_pk"
    return f"where_{primary_key}"


def primary_key_condition(
    primary_key: str, value: Any, quoted_key: Optional[str] = None
) -> Tuple[str, Dict[str, Any]]:
    """
    Build ``<pk> = :where_<pk>`` with its bind entry.

    Examples:
        >>> primary_key_condition("id", 12)
        ('id = :where_id', {'where_id': 12})
    """
    name = primary_key_bind_name(primary_key)
    return f"{quoted_key or primary_key} = {placeholder(name)}", {name: value}


def is_empty_condition(condition: Condition) -> bool:
    """
    Return True for conditions a write must refuse: falsy values and ``"0"``.

    Examples:
        >>> [is_empty_condition(c) for c in (None, "", 0, "0", 1, "age > 1")]
        [True, True, True, True, False, False]
    """
    return not condition or condition == "0"


def normalize_condition(
    condition: Condition, primary_key: str, quoted_key: Optional[str] = None
) -> Tuple[Optional[str], Dict[str, Any]]:
    """
    Turn a caller condition into WHERE text plus extra binds.

    Numeric conditions (including numeric strings and ``0``) become a bound
    primary-key equality. Any other truthy string is a raw predicate and is
    returned unchanged; raw predicates are trusted caller SQL and must not
    embed untrusted input. Falsy non-numeric conditions yield ``None``.

    Examples:
        >>> normalize_condition(5, "id")
        ('id = :where_id', {'where_id': 5})
        >>> normalize_condition("age > :age", "id")
        ('age > :age', {})
        >>> normalize_condition(None, "id")
        (None, {})
    """
    if is_numeric(condition):
        return primary_key_condition(primary_key, coerce_number(condition), quoted_key)
    if not condition:
        return None, {}
    return str(condition), {}

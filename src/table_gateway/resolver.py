"""
Dynamic finder name resolution.

Parses a virtual operation name such as ``findByUserNameAndStatus`` or
``find_first_by_email`` into an operation kind and one or two snake_case
column tokens.

Grammar (camelCase, with an equivalent snake_case spelling):

    ("findBy" | "findFirstBy") <Word> "And" <Word>
    ("findBy" | "findFirstBy") <Word>

The two-column form is tried first and its first word is greedy, so a column
whose own name contains ``And`` (``_and_`` once normalized) is read as two
columns: ``findByBrandAndModelAndYear`` gives ``brand_and_model`` and
``year``. Callers needing such a column use ``Model.find_by_column``.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from table_gateway.utils.naming import uncamelize


class OperationKind(str, Enum):
    """Kinds of dynamic finder."""

    FIND_BY = "find-by"
    FIND_FIRST_BY = "find-first-by"


@dataclass(frozen=True)
class ResolvedOperation:
    """
    A parsed dynamic finder.

    Attributes:
        kind: Whether all matching rows or only the first are wanted.
        columns: One or two snake_case column names.
    """

    kind: OperationKind
    columns: Tuple[str, ...]


_PREFIXES = {
    "findBy": OperationKind.FIND_BY,
    "findFirstBy": OperationKind.FIND_FIRST_BY,
    "find_by": OperationKind.FIND_BY,
    "find_first_by": OperationKind.FIND_FIRST_BY,
}

_PATTERNS = (
    re.compile(
        r"^(?P<func>findBy|findFirstBy)"
        r"(?:(?P<column1>\w+)And(?P<column2>\w+)|(?P<column>\w+))$"
    ),
    re.compile(
        r"^(?P<func>find_by|find_first_by)_"
        r"(?:(?P<column1>\w+)_and_(?P<column2>\w+)|(?P<column>\w+))$"
    ),
)


def resolve(name: str) -> Optional[ResolvedOperation]:
    """
    Resolve a dynamic finder name.

    Args:
        name: Requested operation name

    Returns:
        ResolvedOperation, or None when ``name`` is not a finder name

    Examples:
        >>> resolve("findByUserNameAndStatus")
        ResolvedOperation(kind=<OperationKind.FIND_BY: 'find-by'>, columns=('user_name', 'status'))
        >>> resolve("find_first_by_email").columns
        ('email',)
        >>> resolve("deleteByEmail") is None
        True
    """
    for pattern in _PATTERNS:
        matches = pattern.match(name)
        if matches is None:
            continue
        if matches.group("column2") is not None:
            tokens = (matches.group("column1"), matches.group("column2"))
        else:
            tokens = (matches.group("column"),)
        columns = tuple(uncamelize(token) for token in tokens)
        return ResolvedOperation(kind=_PREFIXES[matches.group("func")], columns=columns)
    return None

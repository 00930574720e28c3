"""
Result shaping for finder operations.

Multi-row finders return rows keyed by primary key when the rows carry it,
otherwise the plain ordered list. Single-row finders collapse "no rows" and
"not found" into ``None``.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

Row = Dict[str, Any]
ResultSet = Union[List[Row], Dict[Any, Row]]


def shape_row(row: Optional[Mapping[str, Any]]) -> Optional[Row]:
    """
    Return a single row as a dict, or None when absent or empty.

    Examples:
        >>> shape_row({"id": 1})
        {'id': 1}
        >>> shape_row({}) is None, shape_row(None) is None
        (True, True)
    """
    if not row:
        return None
    return dict(row)


def key_by(rows: Sequence[Mapping[str, Any]], column: str) -> Dict[Any, Row]:
    """
    Re-key rows by ``column``; a later row wins when keys repeat.

    Examples:
        >>> key_by([{"id": 3, "n": "a"}, {"id": 5, "n": "b"}], "id")
        {3: {'id': 3, 'n': 'a'}, 5: {'id': 5, 'n': 'b'}}
    """
    return {row[column]: dict(row) for row in rows}


def shape_rows(rows: Sequence[Mapping[str, Any]], primary_key: str) -> ResultSet:
    """
    Shape a multi-row result.

    Empty results come back as an empty list. When the first row contains the
    primary key the whole result is keyed by it, otherwise the rows are
    returned as an ordered list.

    Examples:
        >>> shape_rows([], "id")
        []
        >>> shape_rows([{"id": 9, "name": "x"}], "id")
        {9: {'id': 9, 'name': 'x'}}
        >>> shape_rows([{"name": "x"}, {"name": "y"}], "id")
        [{'name': 'x'}, {'name': 'y'}]
    """
    if not rows:
        return []
    if primary_key in rows[0]:
        return key_by(rows, primary_key)
    return [dict(row) for row in rows]

"""
SQL parameter binding utilities.

Bind maps are plain dictionaries keyed by placeholder name without the
leading colon, which is what SQLAlchemy ``text()`` expects. SQL text refers to
a placeholder ``name`` as ``:name``.
"""

import math
import re
from decimal import Decimal
from typing import (
    Any,
    Container,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

Number = Union[int, float]

_BIND_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
_NUMERIC_PATTERN = re.compile(
    r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$"
)


def placeholder(name: str) -> str:
    """
    Render a bind name as a SQL placeholder.

    Examples:
        >>> placeholder("user_name")
        ':user_name'
    """
    return f":{name}"


def normalize_binds(binds: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Copy a caller-supplied bind map, stripping any leading colon from keys.

    Callers may write either ``{":email": ...}`` or ``{"email": ...}``.

    Examples:
        >>> normalize_binds({":email": "a@b.c", "age": 3})
        {'email': 'a@b.c', 'age': 3}
        >>> normalize_binds(None)
        {}
    """
    if not binds:
        return {}
    return {str(key).lstrip(":"): value for key, value in binds.items()}


def is_bind_name(name: str) -> bool:
    """Return True when ``name`` can be used as a ``:name`` placeholder as-is."""
    return bool(_BIND_NAME_PATTERN.fullmatch(name))


def bind_name(column: str, position: int, taken: Container[str] = ()) -> str:
    """
    Pick a bind name for a column that ``text()`` can parse and that is not taken.

    Plain identifiers keep their own name. Anything else (``user-name``,
    non-ASCII names) gets an indexed name, ``col_<position>``. A name already
    in ``taken`` is suffixed ``_2``, ``_3``, ...

    Examples:
        >>> bind_name("user_name", 0)
        'user_name'
        >>> bind_name("user-name", 1)
        'col_1'
        >>> bind_name("年金计划号", 0)
        'col_0'
        >>> bind_name("status", 1, taken={"status"})
        'status_2'
    """
    base = column if is_bind_name(column) else f"col_{position}"
    name = base
    suffix = 2
    while name in taken:
        name = f"{base}_{suffix}"
        suffix += 1
    return name


def build_field_params(
    fields: Mapping[str, Any], taken: Iterable[str] = ()
) -> Tuple[List[str], Dict[str, Any]]:
    """
    Build one placeholder and one bind entry per field.

    Args:
        fields: Mapping of column name to value
        taken: Bind names already in use by the statement

    Returns:
        Tuple of (placeholder strings in field order, bind map)

    Examples:
        >>> placeholders, binds = build_field_params({"name": "bob", "age": 28})
        >>> placeholders
        [':name', ':age']
        >>> binds
        {'name': 'bob', 'age': 28}
        >>> build_field_params({"user-name": "bob"})
        ([':col_0'], {'col_0': 'bob'})
    """
    placeholders: List[str] = []
    binds: Dict[str, Any] = {}
    used = set(taken)
    for position, (field, value) in enumerate(fields.items()):
        name = bind_name(field, position, used)
        used.add(name)
        binds[name] = value
        placeholders.append(placeholder(name))
    return placeholders, binds


def build_indexed_params(
    prefix: str, values: Sequence[Any]
) -> Tuple[List[str], Dict[str, Any]]:
    """
    Build suffixed placeholders for a list of values bound against one column.

    Suffixes are positional so repeated values still get distinct placeholders.
    A prefix that is not a plain identifier is replaced by ``col``.

    Examples:
        >>> placeholders, binds = build_indexed_params("id", [5, 3, 5])
        >>> placeholders
        [':id_0', ':id_1', ':id_2']
        >>> binds
        {'id_0': 5, 'id_1': 3, 'id_2': 5}
    """
    if not is_bind_name(prefix):
        prefix = "col"
    names = [f"{prefix}_{i}" for i in range(len(values))]
    placeholders = [placeholder(name) for name in names]
    binds = dict(zip(names, values))
    return placeholders, binds


def is_numeric(value: Any) -> bool:
    """
    Return True for numbers and numeric strings, False otherwise.

    Booleans are not numeric here, nor are NaN or infinity.

    Examples:
        >>> is_numeric(12), is_numeric("12"), is_numeric("1.5e3")
        (True, True, True)
        >>> is_numeric("age > 20"), is_numeric(True), is_numeric(None)
        (False, False, False)
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        return bool(_NUMERIC_PATTERN.match(value))
    return False


def coerce_number(value: Any) -> Number:
    """
    Convert a numeric value (see :func:`is_numeric`) to int or float.

    Integral values become ``int`` so they compare cleanly against integer keys.
    Integer strings and integral decimals are converted exactly, never through
    ``float``, so keys beyond 2**53 keep every digit.

    Examples:
        >>> coerce_number("12"), coerce_number(" 7.0 "), coerce_number("2.5")
        (12, 7, 2.5)
        >>> coerce_number("12345678901234567")
        12345678901234567
    """
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.match(text):
            return int(text)
        value = Decimal(text)
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if value.is_integer():
        return int(value)
    return value

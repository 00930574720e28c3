"""Core SQL utilities package."""

from .identifier import qualify_table, quote_column_list, quote_identifier
from .parameters import (
    bind_name,
    build_field_params,
    build_indexed_params,
    coerce_number,
    is_numeric,
    normalize_binds,
    placeholder,
)
from .statement import (
    Statement,
    is_empty_condition,
    normalize_condition,
    primary_key_condition,
)

__all__ = [
    "quote_identifier",
    "qualify_table",
    "quote_column_list",
    "bind_name",
    "build_field_params",
    "build_indexed_params",
    "coerce_number",
    "is_numeric",
    "normalize_binds",
    "placeholder",
    "Statement",
    "is_empty_condition",
    "normalize_condition",
    "primary_key_condition",
]

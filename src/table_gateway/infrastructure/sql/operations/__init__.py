"""Statement builders, one per SQL operation family."""

from .delete import DeleteBuilder
from .insert import InsertBuilder
from .select import FieldList, SelectBuilder
from .update import UpdateBuilder

__all__ = [
    "DeleteBuilder",
    "FieldList",
    "InsertBuilder",
    "SelectBuilder",
    "UpdateBuilder",
]

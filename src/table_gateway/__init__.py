"""table_gateway - table-backed models with synthesized SQL and dynamic finders.

Usage:
    >>> from table_gateway import Model, ModelRegistry
    >>> class User(Model):
    ...     pass
    >>> registry = ModelRegistry.from_settings()
    >>> users = registry.model(User)
    >>> users.findByEmail("bob@example.com")
"""

from table_gateway.exceptions import (
    SchemaIntrospectionError,
    TableGatewayError,
    UndefinedOperationError,
    UnknownServiceError,
    UnsupportedDialectError,
)
from table_gateway.io.connection import Connection, ConnectionLike, create_connection
from table_gateway.model import Model, ModelDescriptor
from table_gateway.registry import ModelRegistry
from table_gateway.resolver import OperationKind, ResolvedOperation, resolve

__all__ = [
    "Connection",
    "ConnectionLike",
    "create_connection",
    "Model",
    "ModelDescriptor",
    "ModelRegistry",
    "OperationKind",
    "ResolvedOperation",
    "resolve",
    "TableGatewayError",
    "UndefinedOperationError",
    "SchemaIntrospectionError",
    "UnsupportedDialectError",
    "UnknownServiceError",
]

"""Exceptions raised by table_gateway.

Each exception carries structured context and exposes ``to_dict()`` so it can
be passed straight to a structlog event.
"""

from typing import Any, Dict, Optional


class TableGatewayError(Exception):
    """Base class for all table_gateway errors."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {"error_type": type(self).__name__, "message": str(self)}


class UndefinedOperationError(TableGatewayError):
    """A dynamic finder name did not resolve to a valid operation."""

    def __init__(self, name: str, reason: Optional[str] = None):
        self.name = name
        self.reason = reason
        super().__init__(f"Call to undefined method '{name}'")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({"operation": self.name, "reason": self.reason})
        return data


class SchemaIntrospectionError(TableGatewayError):
    """The describe-table query returned no columns."""

    def __init__(self, table: str):
        self.table = table
        super().__init__(f"No columns found for table '{table}'")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["table"] = self.table
        return data


class UnsupportedDialectError(TableGatewayError):
    """No SQL dialect is registered under the requested name."""

    def __init__(self, dialect: str):
        self.dialect = dialect
        super().__init__(f"Unsupported SQL dialect '{dialect}'")


class UnknownServiceError(TableGatewayError, KeyError):
    """The registry holds no connection or service under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Nothing registered as '{name}'")

    def __str__(self) -> str:
        return str(self.args[0])

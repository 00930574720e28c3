"""Database I/O adapters."""

from .connection import Connection, ConnectionLike, create_connection

__all__ = ["Connection", "ConnectionLike", "create_connection"]

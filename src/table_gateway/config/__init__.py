"""Configuration management for table_gateway.

Usage:
    >>> from table_gateway.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.database_uri)
"""

from table_gateway.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

"""Shared utilities."""

from .naming import uncamelize

__all__ = ["uncamelize"]

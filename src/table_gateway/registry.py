"""
ModelRegistry - explicit container for connections, services and models.

A registry is built once at startup and passed to the code that needs it.
It hands out one model instance per model class, each wired to the
connection named by the class's ``connection_name``, so column catalogs are
fetched once per registry rather than once per call site.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from table_gateway.config.settings import Settings, get_settings
from table_gateway.exceptions import UnknownServiceError
from table_gateway.io.connection import ConnectionLike, create_connection
from table_gateway.model import Model
from table_gateway.utils.logging import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=Model)


class ModelRegistry:
    """
    Container resolving connections, named services and model singletons.

    Usage:
        registry = ModelRegistry.from_settings()
        registry.register("mailer", mailer)
        users = registry.model(User)
        assert users is registry.model(User)
    """

    def __init__(self, preload_columns: bool = False) -> None:
        """
        Initialize an empty registry.

        Args:
            preload_columns: Load each model's column catalog when the model
                is first requested
        """
        self.preload_columns = preload_columns
        self._connections: Dict[str, ConnectionLike] = {}
        self._services: Dict[str, Any] = {}
        self._models: Dict[type, Model] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ModelRegistry":
        """
        Build a registry holding the configured default connection.

        Args:
            settings: Settings to use; defaults to :func:`get_settings`
        """
        settings = settings or get_settings()
        registry = cls(preload_columns=settings.preload_columns)
        connection = create_connection(
            settings.get_database_connection_string(), echo=settings.echo_sql
        )
        registry.register_connection(settings.default_connection, connection)
        return registry

    def register_connection(self, name: str, connection: ConnectionLike) -> None:
        """Register a connection under ``name``, replacing any previous one."""
        self._connections[name] = connection
        logger.debug(
            "registry.connection.registered",
            name=name,
            dialect=connection.dialect.name,
        )

    def connection(self, name: str) -> ConnectionLike:
        """
        Return the connection registered under ``name``.

        Raises:
            UnknownServiceError: If no connection has that name.
        """
        try:
            return self._connections[name]
        except KeyError:
            raise UnknownServiceError(name) from None

    def register(self, name: str, service: Any) -> None:
        """Register an arbitrary service that models can reach by attribute."""
        self._services[name] = service

    def has(self, name: str) -> bool:
        return name in self._services or name in self._connections

    def get(self, name: str) -> Any:
        """
        Return the service or connection registered under ``name``.

        Raises:
            UnknownServiceError: If nothing has that name.
        """
        if name in self._services:
            return self._services[name]
        return self.connection(name)

    def model(self, model_cls: Type[M]) -> M:
        """
        Return the registry's single instance of ``model_cls``.

        Raises:
            UnknownServiceError: If the model's connection is not registered.
        """
        instance = self._models.get(model_cls)
        if instance is not None:
            return instance

        with self._lock:
            instance = self._models.get(model_cls)
            if instance is None:
                instance = model_cls(
                    self.connection(model_cls.connection_name),
                    registry=self,
                    preload_columns=self.preload_columns,
                )
                self._models[model_cls] = instance
                logger.debug(
                    "registry.model.created",
                    model=model_cls.__name__,
                    table=instance.table_name,
                )
        return instance

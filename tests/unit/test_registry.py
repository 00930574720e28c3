"""
Unit tests for ModelRegistry.
"""

import threading

import pytest

from table_gateway.config.settings import Settings
from table_gateway.exceptions import UnknownServiceError
from table_gateway.infrastructure.sql import SQLiteDialect
from table_gateway.io.connection import Connection
from table_gateway.model import Model
from table_gateway.registry import ModelRegistry


class UserProfile(Model):
    pass


class Invoice(Model):
    connection_name = "billing"


@pytest.fixture
def registry(mock_db):
    registry = ModelRegistry()
    registry.register_connection("db", mock_db)
    return registry


class TestConnections:
    def test_lookup(self, registry, mock_db):
        assert registry.connection("db") is mock_db

    def test_unknown_connection(self, registry):
        with pytest.raises(UnknownServiceError) as exc_info:
            registry.connection("missing")

        assert str(exc_info.value) == "Nothing registered as 'missing'"
        assert isinstance(exc_info.value, KeyError)

    def test_from_settings(self):
        settings = Settings(database_uri="sqlite://", default_connection="main")

        registry = ModelRegistry.from_settings(settings)

        connection = registry.connection("main")
        assert isinstance(connection, Connection)
        assert isinstance(connection.dialect, SQLiteDialect)
        connection.dispose()


class TestServices:
    def test_register_and_get(self, registry):
        mailer = object()
        registry.register("mailer", mailer)

        assert registry.has("mailer")
        assert registry.get("mailer") is mailer

    def test_connections_are_services(self, registry, mock_db):
        assert registry.has("db")
        assert registry.get("db") is mock_db

    def test_unknown_service(self, registry):
        assert not registry.has("cache")
        with pytest.raises(UnknownServiceError):
            registry.get("cache")

    def test_model_reaches_service_by_attribute(self, registry):
        mailer = object()
        registry.register("mailer", mailer)

        assert registry.model(UserProfile).mailer is mailer


class TestModels:
    def test_single_instance_per_class(self, registry, mock_db):
        users = registry.model(UserProfile)

        assert users is registry.model(UserProfile)
        assert users.db is mock_db
        assert users.registry is registry

    def test_uses_named_connection(self, registry, mock_db_factory):
        billing_db = mock_db_factory()
        registry.register_connection("billing", billing_db)

        assert registry.model(Invoice).db is billing_db

    def test_missing_connection(self, registry):
        with pytest.raises(UnknownServiceError):
            registry.model(Invoice)

    def test_preload_columns(self, mock_db):
        registry = ModelRegistry(preload_columns=True)
        registry.register_connection("db", mock_db)

        registry.model(UserProfile)

        assert mock_db.query_all.call_count == 1

    def test_concurrent_requests_share_instance(self, registry):
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(registry.model(UserProfile)))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(instance) for instance in results}) == 1

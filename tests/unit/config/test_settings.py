"""Unit tests for the configuration layer.

Tests verify:
- Defaults and TGW_ prefixed environment overrides
- postgres:// URL correction
- Singleton behavior of get_settings
"""

import pytest

from table_gateway.config.settings import Settings, get_settings


@pytest.mark.unit
def test_defaults(monkeypatch):
    monkeypatch.delenv("TGW_DATABASE_URI", raising=False)
    monkeypatch.delenv("TGW_LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.database_uri == "sqlite:///table_gateway.db"
    assert settings.default_connection == "db"
    assert settings.echo_sql is False
    assert settings.preload_columns is False
    assert settings.log_level == "INFO"


@pytest.mark.unit
def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TGW_DATABASE_URI", "mysql+pymysql://app@localhost/app")
    monkeypatch.setenv("TGW_DEFAULT_CONNECTION", "main")
    monkeypatch.setenv("TGW_PRELOAD_COLUMNS", "true")
    monkeypatch.setenv("TGW_ECHO_SQL", "1")

    settings = Settings(_env_file=None)

    assert settings.database_uri == "mysql+pymysql://app@localhost/app"
    assert settings.default_connection == "main"
    assert settings.preload_columns is True
    assert settings.echo_sql is True


@pytest.mark.unit
def test_unprefixed_variables_ignored(monkeypatch):
    monkeypatch.delenv("TGW_DATABASE_URI", raising=False)
    monkeypatch.setenv("DATABASE_URI", "sqlite:///other.db")

    assert Settings(_env_file=None).database_uri == "sqlite:///table_gateway.db"


@pytest.mark.unit
@pytest.mark.parametrize(
    "uri, expected",
    [
        ("postgres://u:p@host/db", "postgresql://u:p@host/db"),
        ("postgresql://u:p@host/db", "postgresql://u:p@host/db"),
        ("sqlite://", "sqlite://"),
    ],
)
def test_connection_string_scheme(uri, expected):
    settings = Settings(database_uri=uri, _env_file=None)

    assert settings.get_database_connection_string() == expected


@pytest.mark.unit
def test_settings_singleton(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setenv("TGW_DEFAULT_CONNECTION", "cached")

    first = get_settings()
    monkeypatch.setenv("TGW_DEFAULT_CONNECTION", "changed")

    assert get_settings() is first
    assert first.default_connection == "cached"

    get_settings.cache_clear()

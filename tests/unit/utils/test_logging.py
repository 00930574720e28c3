"""Unit tests for structured logging framework.

Tests cover:
- get_logger returns a structlog logger rendering JSON
- Sanitization guards sensitive fields
- Context binding
"""

import json
import logging

import pytest

from table_gateway.utils.logging import (
    REDACTED_VALUE,
    bind_context,
    get_logger,
    sanitization_processor,
    sanitize_for_logging,
)


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    """Verify get_logger returns a structlog logger."""
    logger = get_logger("test_module")

    assert hasattr(logger, "bind")
    assert hasattr(logger, "info")
    assert hasattr(logger, "warning")


@pytest.mark.unit
def test_get_logger_renders_json(caplog: pytest.LogCaptureFixture) -> None:
    """Events are rendered as JSON carrying the logger name and level."""
    caplog.set_level(logging.INFO)

    logger = get_logger("my_test_logger")
    logger.info("test_event", table="user")

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["event"] == "test_event"
    assert log_data["logger"] == "my_test_logger"
    assert log_data["level"] == "info"
    assert log_data["table"] == "user"
    assert "timestamp" in log_data


@pytest.mark.unit
def test_sanitize_for_logging_redacts_password() -> None:
    data = {"password": "secret123", "user": "admin"}
    sanitized = sanitize_for_logging(data)

    assert sanitized["password"] == REDACTED_VALUE
    assert sanitized["user"] == "admin"


@pytest.mark.unit
def test_sanitize_for_logging_redacts_database_uri() -> None:
    data = {"database_uri": "mysql://root:pw@localhost/app", "dialect": "mysql"}
    sanitized = sanitize_for_logging(data)

    assert sanitized["database_uri"] == REDACTED_VALUE
    assert sanitized["dialect"] == "mysql"


@pytest.mark.unit
def test_sanitize_for_logging_nested() -> None:
    data = {"connection": {"api_token": "abc", "name": "db"}}
    sanitized = sanitize_for_logging(data)

    assert sanitized["connection"] == {"api_token": REDACTED_VALUE, "name": "db"}


@pytest.mark.unit
def test_sanitization_processor() -> None:
    event = sanitization_processor(
        logging.getLogger("x"), "info", {"event": "e", "db_password": "pw"}
    )

    assert event == {"event": "e", "db_password": REDACTED_VALUE}


@pytest.mark.unit
def test_bind_context(caplog: pytest.LogCaptureFixture) -> None:
    """Bound fields appear in every event of the bound logger."""
    caplog.set_level(logging.INFO)

    logger = bind_context(table="user", connection="db")
    logger.info("model.created")

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["table"] == "user"
    assert log_data["connection"] == "db"

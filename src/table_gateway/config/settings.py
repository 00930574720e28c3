"""
Configuration management for table_gateway.

Environment-based configuration using Pydantic BaseSettings. Variables use
the ``TGW_`` prefix and may also come from a ``.env`` file (override its
location with ``TGW_ENV_FILE``).
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("TGW_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    For example, TGW_DATABASE_URI overrides ``database_uri`` and
    TGW_LOG_LEVEL overrides ``log_level``.
    """

    database_uri: str = Field(
        default="sqlite:///table_gateway.db",
        description="SQLAlchemy URL of the default connection",
    )
    default_connection: str = Field(
        default="db",
        description="Registry name under which the default connection is registered",
    )
    echo_sql: bool = Field(
        default=False, description="Pass echo=True to the SQLAlchemy engine"
    )
    preload_columns: bool = Field(
        default=False,
        description="Load each model's column catalog eagerly when it is created",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(default=False, description="Also log to a file")
    log_file_dir: str = Field(default="logs", description="Directory for log files")

    model_config = SettingsConfigDict(
        env_prefix="TGW_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def get_database_connection_string(self) -> str:
        """
        Get the database URL for SQLAlchemy.

        Automatically corrects 'postgres://' scheme to 'postgresql://' for
        SQLAlchemy compatibility.
        """
        uri = self.database_uri
        if uri.startswith("postgres://"):
            uri = uri.replace("postgres://", "postgresql://", 1)
        return uri


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()

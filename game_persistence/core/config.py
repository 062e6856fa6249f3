"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

Environment variables use double underscore (__) as delimiters for nested properties.
For example: DATABASE__URL maps to settings.database.url
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Database Configuration Models
# =====================================================================


class PostgreSQLConfig(BaseModel):
    """PostgreSQL database configuration."""

    db: str = Field(default="game_persistence", description="PostgreSQL database name")
    user: str = Field(default="game_persistence", description="PostgreSQL database user")
    password: SecretStr = Field(default=SecretStr("changeme"), description="PostgreSQL database password")
    host: str = Field(default="localhost", description="PostgreSQL database host address")
    port: int = Field(default=5432, description="PostgreSQL database port number")

    model_config = ConfigDict(strict=False)

    @property
    def url(self) -> str:
        """Async connection URL built from the individual settings."""
        return (
            f"postgresql+asyncpg://{self.user}:{self.password.get_secret_value()}"
            f"@{self.host}:{self.port}/{self.db}"
        )


class DatabaseConfig(BaseModel):
    """Database configuration container."""

    url: str = Field(
        default="sqlite+aiosqlite:///./game_persistence.db",
        description="Async database connection URL (SQLite or PostgreSQL)",
    )
    echo: bool = Field(default=False, description="Echo every emitted SQL statement")
    postgres: PostgreSQLConfig = Field(default_factory=PostgreSQLConfig, description="PostgreSQL configuration")

    model_config = ConfigDict(strict=False)


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
        populate_by_name=True,
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="GAME_PERSISTENCE_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write DEBUG-level logs to a file under log_file_dir",
        alias="ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig,
        description="Database configuration (SQLite, PostgreSQL)",
    )


_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings instance, creating it on first use."""
    global _settings_instance

    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


settings = get_settings()

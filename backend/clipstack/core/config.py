"""
Application Configuration

Settings class using pydantic-settings for environment variable loading.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    For example, DATABASE_URL can be set via the DATABASE_URL env var.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="ClipStack API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    version: str = Field(default="0.1.0", description="API version")
    log_level: str = Field(default="INFO", description="Root log level")

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./clipstack.db",
        description="Database connection URL",
    )
    sql_echo: bool = Field(default=False, description="Echo SQL statements")
    auto_create_tables: bool = Field(
        default=True,
        description="Create missing tables on startup (development convenience)",
    )

    # HTTP listener
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(
        default=2022,
        alias="SERVER_PORT",
        description="HTTP listener port",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string to list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings instance.

    Uses lru_cache to ensure settings are only loaded once per process.

    Example:
        >>> settings = get_settings()
        >>> print(settings.port)
        2022
    """
    return Settings()


settings = get_settings()

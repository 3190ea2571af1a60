"""Application settings and configuration.

This module defines all configuration options for the Roomgate application.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Roomgate", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    timezone: str = Field(default="Asia/Bangkok", alias="TIMEZONE")

    # Security and authentication
    secret_key: str = Field(default="change-me", alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Database configuration
    database_url: str = Field(default="sqlite:///./roomgate.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Message channel for door controllers
    redis_url: str = Field(default="redis://localhost:6379", alias="REDIS_URL")
    actuation_timeout_seconds: float = Field(default=2.0, alias="ACTUATION_TIMEOUT_SECONDS")

    # Door access codes (one window = one second)
    door_code_window_offset: int = Field(default=300, alias="DOOR_CODE_WINDOW_OFFSET")
    door_code_lookbehind: int = Field(default=1, alias="DOOR_CODE_LOOKBEHIND")
    door_code_lookahead: int = Field(default=300, alias="DOOR_CODE_LOOKAHEAD")
    door_placeholder_room_id: str = Field(default="9999", alias="DOOR_PLACEHOLDER_ROOM_ID")
    door_placeholder_document_id: str = Field(
        default="1234567890123",
        alias="DOOR_PLACEHOLDER_DOCUMENT_ID",
    )

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts asyncpg URLs to psycopg for synchronous database operations
        like Alembic migrations.
        """
        url = self.effective_database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides."""
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url

    @property
    def door_code_band(self) -> tuple[int, int]:
        """Return the verification tolerance band as (lookbehind, lookahead)."""
        return self.door_code_lookbehind, self.door_code_lookahead


settings = Settings()

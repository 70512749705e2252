"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; pass a Settings instance to
create_app() to override it in tests.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix for every router.
        rate_limit_enabled: Turn request rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        database_url: Full SQLAlchemy URL. Overrides the postgres_* values.
        db_pool_size: Connection pool size (ignored for SQLite).
        db_max_overflow: Extra connections beyond the pool size.
        db_echo: Log every SQL statement.
        auto_create_schema: Create missing tables at startup.
        server_host: Bind address for the ``serve`` command.
        server_port: Bind port for the ``serve`` command.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Promotion Tracking API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "promotions"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_echo: bool = False
    auto_create_schema: bool = True

    server_host: str = "0.0.0.0"
    server_port: int = 8080

    def get_database_dsn(self) -> str:
        """Return the effective database DSN.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build a psycopg DSN from postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()

"""Application settings via pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from coins_api.errors import ServerConfigError

ASYNCPG_SCHEME = "postgresql+asyncpg://"
_PLAIN_POSTGRES_SCHEMES = ("postgres://", "postgresql://")


class Settings(BaseSettings):
    """Application configuration loaded from environment variables with COINS_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="COINS_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
    log_format: str = "json"

    # --- Database ---
    database_url: str | None = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str | None = None
    db_user: str | None = None
    db_password: str | None = None
    db_pool_size: int = 10
    db_max_overflow: int = 5
    db_statement_timeout_ms: int = 5000
    db_ssl: bool | None = None

    # --- Shared key ---
    api_key: str | None = None

    # --- Admin session (JWT) ---
    jwt_secret: str | None = None
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 480
    admin_email: str | None = None
    admin_password: str | None = None

    # --- Public balance lookup ---
    balance_variant: Literal["detailed", "basic"] = "detailed"
    balance_not_found_message: str = "You don't have any gold coins yet \U0001f622"

    def resolved_database_url(self) -> str:
        """
        Return the datastore URL for the async engine.

        An explicit ``database_url`` wins, with plain ``postgres://`` and
        ``postgresql://`` schemes rewritten to the asyncpg driver; otherwise the
        discrete host/port/name/user/password settings are composed into an asyncpg URL.

        Raises:
            ServerConfigError: If neither form is complete.
        """
        if self.database_url:
            for scheme in _PLAIN_POSTGRES_SCHEMES:
                if self.database_url.startswith(scheme):
                    return ASYNCPG_SCHEME + self.database_url[len(scheme) :]
            return self.database_url
        if not (self.db_name and self.db_user and self.db_password):
            msg = "Incomplete database configuration: set COINS_DATABASE_URL or COINS_DB_NAME, COINS_DB_USER and COINS_DB_PASSWORD"
            raise ServerConfigError(msg)
        return f"{ASYNCPG_SCHEME}{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    def database_ssl(self) -> bool:
        """
        Whether to encrypt datastore connections (without certificate verification).

        ``db_ssl`` wins when set. Otherwise a ``database_url`` that does not mention
        localhost gets SSL and the discrete settings connect in plain text.
        """
        if self.db_ssl is not None:
            return self.db_ssl
        return bool(self.database_url) and "localhost" not in self.database_url


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()

"""
SQL chunk store connection settings.

Either the individual ``POSTGRES_*`` fields or a full ``POSTGRES_URL_OVERRIDE``
(any async SQLAlchemy URL, e.g. ``sqlite+aiosqlite://`` for local runs).

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from scan_rag.configs.base import ENV_FILE


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection and pool sizing."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"
    db: str = "scanrag"

    pool_size: int = Field(default=10, ge=1)
    max_overflow: int = Field(default=20, ge=0)
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    echo_sql: bool = False

    url_override: str = Field(default="", description="Replaces the host/port/user fields when set")

    @property
    def async_database_url(self) -> str:
        """SQLAlchemy URL for the asyncpg driver (or the override)."""
        return self.url_override or (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}"
        )

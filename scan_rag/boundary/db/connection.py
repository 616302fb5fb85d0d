"""
Async engine and session factory for the SQL chunk store.

Dependencies: sqlalchemy, scan_rag.configs
System role: Database connection lifecycle management
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from scan_rag.configs import get_settings


def get_async_engine() -> AsyncEngine:
    """
    Build an engine from ``POSTGRES_*`` settings.

    Pool sizing only applies to server databases; a SQLite URL keeps the
    driver's own pool.

    Returns:
        AsyncEngine: Engine for the configured URL
    """
    config = get_settings().database
    url = config.async_database_url

    options: dict[str, Any] = {"echo": config.echo_sql}
    if not url.startswith("sqlite"):
        options.update(
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
            pool_pre_ping=True,
        )
    return create_async_engine(url, **options)


def get_async_session_factory(engine: AsyncEngine | None = None) -> async_sessionmaker:
    """
    Session factory bound to ``engine`` (a fresh configured engine when None).

    Sessions do not expire objects on commit, so ORM rows can be converted
    to ``ChunkRecord`` after the session closes.
    """
    return async_sessionmaker(
        bind=engine or get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )

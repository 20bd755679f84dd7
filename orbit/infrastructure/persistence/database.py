"""Database engine and session factory creation."""

import logging
import os
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from orbit.config import Config
from orbit.infrastructure.persistence.tables import metadata

logger = logging.getLogger(__name__)


def _expand_sqlite_path(url: str) -> str:
    """Expand ~ in SQLite URLs and ensure parent directory exists."""
    if not url.startswith("sqlite") or ":memory:" in url or "///" not in url:
        return url

    # Extract path from URL (sqlite+aiosqlite:///path or sqlite:///path)
    prefix_end = url.index("///") + 3
    prefix = url[:prefix_end]
    path = url[prefix_end:]

    # Expand ~ and make absolute
    expanded = os.path.expanduser(path)
    abs_path = os.path.abspath(expanded)

    # Ensure parent directory exists
    parent = Path(abs_path).parent
    parent.mkdir(parents=True, exist_ok=True)

    return f"{prefix}{abs_path}"


def create_db_engine(config: Config) -> AsyncEngine:
    """Create async database engine.

    Handles SQLite and PostgreSQL with appropriate settings.
    """
    url = _expand_sqlite_path(config.database.url)
    is_sqlite = url.startswith("sqlite")

    if is_sqlite and ":memory:" in url:
        engine_kwargs: dict[str, Any] = {
            "echo": config.database.echo,
            # An in-memory database lives in one connection; share it
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    elif is_sqlite:
        engine_kwargs = {
            "echo": config.database.echo,
            # Concurrent persists each hold a connection; wait on SQLite's write lock
            "connect_args": {"check_same_thread": False, "timeout": 30},
        }
    else:
        # PostgreSQL settings
        engine_kwargs = {
            "echo": config.database.echo,
            "pool_pre_ping": True,
            "pool_size": 5,
            "max_overflow": 10,
        }

    return create_async_engine(url, **engine_kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory for dependency injection."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database schema ready")

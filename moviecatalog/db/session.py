# moviecatalog/db/session.py
from __future__ import annotations

"""
What To Watch · Database Engine & Session Dependency

- One async engine/session factory shared by the app.
- Pool sizing knobs apply to server databases only (SQLite has no pool to size).
"""

from typing import Any, AsyncGenerator, Dict

from loguru import logger
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from moviecatalog.core.config import settings

# ─────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────
ASYNC_DATABASE_URL: str = settings.ASYNC_DATABASE_URL

# Pool knobs
_POOL_PRE_PING = True
_POOL_RECYCLE = 1800
_POOL_TIMEOUT = 30
_POOL_SIZE = 10
_MAX_OVERFLOW = 20


def engine_kwargs(url: str) -> Dict[str, Any]:
    """Engine options for `url`; pool sizing is skipped for SQLite."""
    kwargs: Dict[str, Any] = {"echo": False, "pool_pre_ping": _POOL_PRE_PING}
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_recycle=_POOL_RECYCLE,
            pool_size=_POOL_SIZE,
            max_overflow=_MAX_OVERFLOW,
            pool_timeout=_POOL_TIMEOUT,
        )
    return kwargs


# ─────────────────────────────────────────────────────────────
# ⚡ ASYNC ENGINE
# ─────────────────────────────────────────────────────────────
async_engine: AsyncEngine = create_async_engine(ASYNC_DATABASE_URL, **engine_kwargs(ASYNC_DATABASE_URL))

async_session_maker = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields an async SQLAlchemy session."""
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def db_healthcheck(engine: AsyncEngine | None = None) -> bool:
    """Quick SELECT 1 to verify DB connectivity (used by startup and /readyz)."""
    try:
        async with (engine or async_engine).connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.exception("DB healthcheck failed")
        return False


__all__ = [
    "async_engine",
    "async_session_maker",
    "engine_kwargs",
    "get_async_db",
    "db_healthcheck",
]

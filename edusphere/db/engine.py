"""Async database engine, session factory, and lifespan management.

Uses SQLAlchemy 2.0 async with the aiosqlite driver for the single-file
school database. Redis client for login rate limiting.
"""

from __future__ import annotations

import contextlib
from collections.abc import AsyncGenerator

import redis.asyncio as aioredis
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from edusphere.config import settings

# ── Async SQLite engine ──────────────────────────────────────────────

engine: AsyncEngine = create_async_engine(
    settings.db.database_url,
    echo=settings.log_level == "DEBUG",
)

# ── Session factory ──────────────────────────────────────────────────

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for FastAPI — yields an async DB session.

    Usage:
        @router.get("/example")
        async def handler(session: AsyncSession = Depends(get_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# ── Redis client ─────────────────────────────────────────────────────

redis_client: aioredis.Redis = aioredis.from_url(
    settings.db.redis_url,
    decode_responses=True,
)


# ── Lifespan helpers ─────────────────────────────────────────────────


async def init_db() -> None:
    """Open the database file and create missing tables outside production.

    In production the schema comes from the Alembic revision, so nothing is
    created here.
    """
    async with engine.begin() as conn:
        # Import here to ensure all models are registered with Base.metadata
        from edusphere.models import Base

        if not settings.is_production:
            await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose database engine and Redis connections."""
    await engine.dispose()
    await redis_client.aclose()


@contextlib.asynccontextmanager
async def db_lifespan() -> AsyncGenerator[None, None]:
    """Context manager for database lifecycle.

    Usage in FastAPI lifespan:
        @asynccontextmanager
        async def lifespan(app: FastAPI):
            async with db_lifespan():
                yield
    """
    await init_db()
    try:
        yield
    finally:
        await close_db()

"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from agentdesk.core.config import get_settings
from agentdesk.infrastructure.database.base import Base

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
AsyncSessionFactory: async_sessionmaker[AsyncSession] | None = None


def _build_engine() -> AsyncEngine:
    settings = get_settings()
    engine_kwargs: dict[str, Any] = {
        "echo": settings.database.echo or settings.debug,
        "future": True,
    }
    if settings.database.pool_size is not None:
        engine_kwargs["pool_size"] = settings.database.pool_size
    if settings.database.max_overflow is not None:
        engine_kwargs["max_overflow"] = settings.database.max_overflow

    return create_async_engine(settings.database_url, **engine_kwargs)


def get_engine() -> AsyncEngine:
    global _engine, AsyncSessionFactory
    if _engine is None:
        _engine = _build_engine()
        AsyncSessionFactory = async_sessionmaker(
            bind=_engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _engine


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    if AsyncSessionFactory is None:
        get_engine()

    assert AsyncSessionFactory is not None  # for mypy
    async with AsyncSessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db(engine: AsyncEngine | None = None) -> None:
    """Create database tables in development mode (migrations preferred)."""
    # Deferred import registers the models on Base.metadata
    from agentdesk.db import models  # noqa: F401

    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured on %s", engine.url.render_as_string(hide_password=True))


async def dispose_engine() -> None:
    global _engine, AsyncSessionFactory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    AsyncSessionFactory = None

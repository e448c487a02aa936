"""Database configuration and session management."""

from collections.abc import AsyncIterator

from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from farmadvisor.config import settings

DATABASE_URL = settings.database_url
_SQL_ECHO = settings.is_development


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


# Async engine for FastAPI endpoints
async_engine = create_async_engine(DATABASE_URL, echo=_SQL_ECHO)
AsyncSessionLocal = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# Sync engine for Celery jobs and scripts
sync_engine = create_engine(
    DATABASE_URL.replace("+asyncpg", ""),
    echo=_SQL_ECHO,
)
SyncSessionLocal = sessionmaker(sync_engine, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Dependency for FastAPI endpoints."""
    async with AsyncSessionLocal() as session:
        yield session

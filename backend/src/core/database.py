"""
Async Database Configuration
One engine and session factory per process; one session per request
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from loguru import logger

from .config import settings


def build_engine(url: str) -> AsyncEngine:
    """SQLite (tests, local runs) gets no pool; PostgreSQL keeps the driver default"""
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=settings.DEBUG, poolclass=NullPool)
    return create_async_engine(url, echo=settings.DEBUG, pool_pre_ping=True)


engine: AsyncEngine = build_engine(settings.DATABASE_URL)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# Base class for ORM models
Base = declarative_base()


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Session that commits on success and rolls back on any error"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: the request's unit of work"""
    async with get_db_session() as session:
        yield session


async def init_db():
    """Create the users and jobs tables if missing"""
    # Register ORM models on Base.metadata
    import infrastructure.persistence.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db():
    await engine.dispose()


async def health_check() -> bool:
    try:
        async with get_db_session() as session:
            await session.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        return False

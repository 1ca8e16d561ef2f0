"""Async engine, session factory and schema management."""

import logging
from pathlib import Path

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tollgate.infrastructure.persistence.sqlalchemy.models import Base
from tollgate_auth.persistence.sqlalchemy import AuthBase

logger = logging.getLogger(__name__)

_ALL_METADATA = (Base.metadata, AuthBase.metadata)


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine for ``database_url``.

    For file-based SQLite the parent directory is created if missing.
    """
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Covers both the application's profile tables and the tollgate_auth
    credential table. Existing tables and their data are never modified.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        for metadata in _ALL_METADATA:
            await conn.run_sync(metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        for metadata in _ALL_METADATA:
            await conn.run_sync(metadata.drop_all)

    logger.info("Database tables dropped successfully")

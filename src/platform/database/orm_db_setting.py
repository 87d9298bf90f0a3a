"""
SQLAlchemy async engine and session management with Read-Write Separation

This module provides:
1. AsyncEngineManager: Manages separate read/write engines with event loop awareness
2. Base: declarative base for every ORM model
3. get_async_session: FastAPI session dependency for the unit of work
4. Database: session factory for dependency injection

Read-Write Separation:
- Write operations: Always use primary database
- Read operations: Use read replica if configured, otherwise fall back to primary
- Transaction consistency: Within UoW, all operations use write session
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class AsyncEngineManager:
    """
    Manages SQLAlchemy async engines with event loop awareness.

    Ensures engines are always bound to the current event loop to prevent
    "Task got Future attached to a different loop" errors (TestClient and
    uvicorn reload both start fresh loops).
    """

    def __init__(self) -> None:
        self._write_engine: Optional[AsyncEngine] = None
        self._read_engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._write_session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._read_session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self, *, read_only: bool = False) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop running, create engine without loop tracking
            if read_only:
                if self._read_engine is None:
                    self._read_engine = self._create_engine(read_only=True)
                return self._read_engine
            if self._write_engine is None:
                self._write_engine = self._create_engine(read_only=False)
            return self._write_engine

        if self._loop is not current_loop:
            if self._write_engine is not None or self._read_engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, dropping old engines...')
                self._reset()

            Logger.base.info(f'🔗 [DB] Creating engines for event loop {id(current_loop)}')
            self._write_engine = self._create_engine(read_only=False)
            self._read_engine = self._create_engine(read_only=True)
            self._loop = current_loop

        engine = self._read_engine if read_only else self._write_engine
        assert engine is not None
        return engine

    def get_session_maker(self, *, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine(read_only=read_only)

        if read_only:
            if self._read_session_maker is None:
                self._read_session_maker = async_sessionmaker(
                    engine, class_=AsyncSession, expire_on_commit=False
                )
            return self._read_session_maker

        if self._write_session_maker is None:
            self._write_session_maker = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )
        return self._write_session_maker

    async def dispose(self) -> None:
        for engine in {self._write_engine, self._read_engine}:
            if engine is not None:
                await engine.dispose()
        self._reset()
        self._loop = None

    def _reset(self) -> None:
        self._write_engine = None
        self._read_engine = None
        self._write_session_maker = None
        self._read_session_maker = None

    def _create_engine(self, *, read_only: bool) -> AsyncEngine:
        """Read engine gets the larger pool; pool tuning lives in settings."""
        return create_async_engine(
            settings.DATABASE_READ_URL_ASYNC if read_only else settings.DATABASE_URL_ASYNC,
            echo=False,
            pool_size=settings.DB_POOL_SIZE_READ if read_only else settings.DB_POOL_SIZE_WRITE,
            max_overflow=settings.DB_POOL_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
        )


# Global engine manager
_engine_manager = AsyncEngineManager()


def get_engine(*, read_only: bool = False) -> AsyncEngine:
    """Get event-loop-aware engine (read_only: use replica if available)"""
    return _engine_manager.get_engine(read_only=read_only)


def get_session_maker(*, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
    """Get event-loop-aware session maker (read_only: use replica if available)"""
    return _engine_manager.get_session_maker(read_only=read_only)


async def dispose_engines() -> None:
    await _engine_manager.dispose()


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Session Providers (for FastAPI Depends injection)
# =============================================================================


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide async session for dependency injection (write operations)

    The session maker context manager closes the session on exit and rolls
    back anything left uncommitted.
    """
    session_maker = get_session_maker(read_only=False)
    async with session_maker() as session:
        yield session


# =============================================================================
# Database Class (for DI container)
# =============================================================================


class Database:
    """Session factory handed to repositories that live outside a unit of work."""

    def __init__(self, *, read_only: bool = False) -> None:
        self._read_only = read_only

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session_maker = get_session_maker(read_only=self._read_only)
        async with session_maker() as session:
            yield session

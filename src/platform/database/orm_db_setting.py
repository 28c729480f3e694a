"""
SQLAlchemy async engine and session management

The engine is owned by a `Database` instance that the DI container creates
once per process. The FastAPI lifespan calls `connect()` at startup and
`dispose()` at shutdown; nothing opens a connection at import time.

Driver/ORM failures raised inside `Database.session()` are re-raised as
`StorageError` with the original exception chained, so callers never see
raw SQLAlchemy or asyncpg errors. Domain errors pass through untouched.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


class Database:
    def __init__(self, settings: Settings, *, url: Optional[str] = None) -> None:
        self._settings = settings
        self._url = url or settings.DATABASE_URL_ASYNC
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = create_async_engine(
                self._url,
                echo=self._settings.DB_ECHO,
                pool_size=self._settings.DB_POOL_SIZE,
                max_overflow=self._settings.DB_POOL_MAX_OVERFLOW,
                pool_timeout=self._settings.DB_POOL_TIMEOUT,
                pool_recycle=self._settings.DB_POOL_RECYCLE,
                pool_pre_ping=self._settings.DB_POOL_PRE_PING,
                # read committed is the asyncpg default; pinned so row locks behave as expected
                isolation_level='READ COMMITTED',
            )
            self._session_maker = async_sessionmaker(
                self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        self.engine  # noqa: B018 - lazily builds the session maker
        assert self._session_maker is not None
        return self._session_maker

    async def connect(self) -> None:
        """Open one connection so misconfiguration fails at startup instead of first request"""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text('SELECT 1'))
        except (SQLAlchemyError, OSError) as e:
            raise StorageError('Database is unreachable') from e
        Logger.base.info(f'🔗 [DB] Connected to {self.engine.url.render_as_string()}')

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            Logger.base.info('🔌 [DB] Engine disposed')
        self._engine = None
        self._session_maker = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Scoped session; always closed on exit, rolled back if not committed.
        """
        async with self.session_maker() as session:
            try:
                yield session
            except (SQLAlchemyError, OSError) as e:
                raise StorageError() from e

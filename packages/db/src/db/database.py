# This project was developed with assistance from AI tools.
"""Async SQLAlchemy engine and session factory.

The engine is created lazily so importing ``db`` never opens a connection;
tests that swap the history store never touch a real database.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from .config import db_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class DatabaseService:
    """Owns the async engine and session factory for one database URL."""

    def __init__(self, url: str | None = None, echo: bool | None = None) -> None:
        self.url = url or db_settings.DATABASE_URL
        self.echo = db_settings.SQL_ECHO if echo is None else echo
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = create_async_engine(
                self.url,
                echo=self.echo,
                pool_size=db_settings.POOL_SIZE,
                pool_pre_ping=True,
            )
        return self._engine

    @property
    def sessionmaker(self) -> async_sessionmaker[AsyncSession]:
        if self._sessionmaker is None:
            self._sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False)
        return self._sessionmaker

    def session(self) -> AsyncSession:
        """Open a new session; use as ``async with service.session() as s``."""
        return self.sessionmaker()

    async def dispose(self) -> None:
        """Close pooled connections. Safe to call when the engine was never built."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._sessionmaker = None
            logger.info("Database engine disposed")


_db_service: DatabaseService | None = None


def get_db_service() -> DatabaseService:
    """Return the process-wide DatabaseService, creating it on first use."""
    global _db_service  # noqa: PLW0603
    if _db_service is None:
        _db_service = DatabaseService()
    return _db_service


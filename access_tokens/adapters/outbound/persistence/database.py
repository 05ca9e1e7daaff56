# access_tokens/adapters/outbound/persistence/database.py (async version)

import logging
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base

from access_tokens.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

# ─── Base definition ───────────────────────────────────────────────────────────
# Parent class of every ORM model, holds the metadata
Base = declarative_base()
# ────────────────────────────────────────────────────────────────────────────────


def to_async_url(url: str) -> str:
    """Swap the sync driver used by Alembic for the async one used by the app."""
    if url.startswith("postgresql+psycopg2"):
        return url.replace("postgresql+psycopg2", "postgresql+asyncpg", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


class Database:
    """
    Process-wide owner of the async engine and session factory.

    Both are built on first use and reused for the life of the process.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = to_async_url(url)
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._connect()
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker:
        if self._session_factory is None:
            self._connect()
        return self._session_factory

    def _connect(self) -> None:
        logger.info(f"Connecting to database: {self.url.split('@')[-1]}")
        pool_options = {}
        if not self.url.startswith("sqlite"):
            pool_options = dict(
                pool_size=20,
                max_overflow=10,
                pool_timeout=30,
                pool_recycle=1800,
                pool_pre_ping=True,
            )
        try:
            self._engine = create_async_engine(self.url, echo=self.echo, **pool_options)
            self._session_factory = async_sessionmaker(
                autoflush=False,
                bind=self._engine,
                expire_on_commit=False,
            )
            logger.info("Async database connection configured successfully")
        except SQLAlchemyError as e:
            logger.error(f"Error connecting to database: {str(e)}")
            raise

    async def create_all(self) -> None:
        """Create database tables if they don't exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()


database = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Provides an async context for database operations,
    ensuring the session is closed at the end.

    Yields:
        AsyncSession: SQLAlchemy async session

    Example:
        ```python
        async with get_db_context() as db:
            tokens = await token_repository.list_active(db, "user123", utc_now())
        ```
    """
    session = database.session_factory()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    async with get_db_context() as session:
        yield session

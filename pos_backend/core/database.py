"""
Async database setup with SQLAlchemy 2.0.
Provides the store client, session management, and base model.
"""
from typing import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
    AsyncEngine
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import MetaData, Uuid, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool
from fastapi import Depends, Request
import uuid

from pos_backend.core.config import Settings
from pos_backend.logging_config import get_logger

logger = get_logger("database")


# Naming convention for constraints
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)


class Base(DeclarativeBase):
    """Base class for all stored documents."""
    metadata = metadata

    # Internal document identifier, assigned by the server
    document_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4
    )


class Store:
    """
    Client for the document store.

    Built once at startup and handed to request handlers through
    ``app.state.store``; repositories receive sessions opened from it.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 40
    ):
        self.database_url = database_url

        # Use appropriate pool based on database URL
        if database_url.startswith("sqlite"):
            # SQLite doesn't support connection pooling
            self.engine: AsyncEngine = create_async_engine(
                database_url,
                echo=echo,
                poolclass=NullPool,
                connect_args={"check_same_thread": False}
            )
        else:
            self.engine = create_async_engine(
                database_url,
                echo=echo,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,  # Verify connections before using
                pool_recycle=3600,   # Recycle connections after 1 hour
            )

        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Store":
        """Build a store from application settings."""
        if not settings.database_url:
            raise RuntimeError("DATABASE_URL is not set")
        return cls(
            settings.database_url,
            echo=settings.db_echo,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Context manager for store sessions.

        Usage:
            async with store.session() as db:
                result = await db.execute(select(Product))
                products = result.scalars().all()
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create missing tables and unique indexes. Use Alembic in production."""
        # Import all models to ensure they're registered
        from pos_backend.models import product, invoice  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Health check for the store connection."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as exc:
            logger.warning(f"Store ping failed: {exc}")
            return False

    async def dispose(self) -> None:
        """Close store connections."""
        await self.engine.dispose()


def get_store(request: Request) -> Store:
    """Dependency returning the store attached to the running application."""
    return request.app.state.store


async def get_db(store: Store = Depends(get_store)) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for FastAPI endpoints.
    Provides a store session and ensures proper cleanup.
    """
    async with store.session() as session:
        yield session

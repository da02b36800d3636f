from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from server.config import Settings, settings

# Naming conventions for database constraints, so Alembic autogenerates stable names.
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    Base.metadata tracks every registered model; the naming convention keeps
    constraint names predictable for migrations.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def make_engine(config: Settings) -> AsyncEngine:
    """Create the async engine for ``config.database_url``.

    PostgreSQL (asyncpg) gets pool sizing and a statement timeout;
    SQLite (aiosqlite) gets neither.
    """
    kwargs: dict[str, Any] = {"echo": config.db_echo, "pool_pre_ping": True}
    if config.database_url.startswith("postgresql"):
        kwargs.update(
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
            pool_timeout=config.db_pool_timeout,
            pool_recycle=config.db_pool_recycle,
            connect_args={"command_timeout": config.db_statement_timeout},
        )
    return create_async_engine(config.database_url, **kwargs)


engine = make_engine(settings)

# expire_on_commit=False keeps objects readable after commit without a refresh query.
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that provides a database session per request.

    Commits on success, rolls back on exception. Services and repositories
    never call commit() or rollback() directly.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def shutdown() -> None:
    """Close all pooled database connections."""
    await engine.dispose()

from collections.abc import AsyncGenerator

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from nomad.config import settings

# Naming conventions for database constraints, so constraint names are predictable
# in error messages.
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",  # Index
    "uq": "uq_%(table_name)s_%(column_0_name)s",  # Unique constraint
    "ck": "ck_%(table_name)s_%(constraint_name)s",  # Check constraint
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",  # Foreign key
    "pk": "pk_%(table_name)s",  # Primary key
}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    All models inherit from this class. SQLAlchemy uses Base.metadata to track
    all registered models and their table schemas.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def make_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the catalog store.

    An in-memory SQLite database exists only as long as its connection, so every
    session must share a single connection (StaticPool). check_same_thread is off
    because aiosqlite drives the connection from its own worker thread.
    """
    return create_async_engine(
        url,
        echo=echo,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


engine = make_engine(settings.database_url, echo=settings.db_echo)

# expire_on_commit=False keeps objects usable after commit without re-querying.
# Accessing expired attributes would trigger sync I/O, which async sessions forbid.
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that provides a database session per request.

    Commits on success, rolls back on exception. This is the single place where
    transaction boundaries are managed; services and repositories never call
    commit() or rollback() directly.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_schema() -> None:
    """Create all catalog tables on the application engine."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def shutdown() -> None:
    """Close the pooled connection. For the in-memory catalog this discards all data."""
    await engine.dispose()

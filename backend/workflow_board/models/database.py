"""Database setup and connection management."""

import uuid
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from ..config import get_config


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


def generate_id() -> str:
    """Store-assigned document id."""
    return uuid.uuid4().hex


_engine = None
_async_session_factory = None


def get_database_url() -> str:
    """Get the database URL from configuration."""
    config = get_config()
    db_path = config.database.path

    # Ensure directory exists
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return f"sqlite+aiosqlite:///{db_path}"


def create_sqlite_engine(database_url: str, **kwargs) -> AsyncEngine:
    """Create an aiosqlite engine whose transactions support SAVEPOINT."""
    engine = create_async_engine(database_url, **kwargs)

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        # SQLAlchemy emits BEGIN itself below
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


async def init_db() -> None:
    """Initialize the database, creating tables if needed."""
    global _engine, _async_session_factory

    database_url = get_database_url()
    _engine = create_sqlite_engine(
        database_url,
        echo=get_config().logging.level == "debug",
    )

    _async_session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Import all models to register them
    from . import column, project, workflow  # noqa: F401

    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose of the engine on shutdown."""
    global _engine, _async_session_factory

    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _async_session_factory = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session."""
    if _async_session_factory is None:
        await init_db()

    async with _async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

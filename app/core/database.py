"""Async SQLAlchemy engine, session factory and the request-scoped session."""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import DATABASE_URL, DB_ECHO, DB_MAX_OVERFLOW, DB_POOL_SIZE


def engine_options(url: str) -> dict:
    """Pool sizing applies to server databases only; SQLite has no queue pool."""
    options = {"echo": DB_ECHO}
    if make_url(url).get_backend_name() != "sqlite":
        options.update(pool_size=DB_POOL_SIZE, max_overflow=DB_MAX_OVERFLOW, pool_pre_ping=True)
    return options


engine = create_async_engine(DATABASE_URL, **engine_options(DATABASE_URL))

async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_db() -> AsyncSession:  # type: ignore[misc]
    """Yield one session per request; repositories commit their own writes."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

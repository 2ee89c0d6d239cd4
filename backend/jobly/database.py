"""
Database engine and session factory.

Every request gets its own AsyncSession through get_db(); nothing is shared
between requests except the engine's connection pool.
"""
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from jobly.config import settings


engine = create_async_engine(settings.database_url, echo=settings.debug)

AsyncSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


class Base(DeclarativeBase):
    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a database session.

    Closing the session rolls back anything left uncommitted, so a
    cancelled request leaves no partial writes behind.
    """
    async with AsyncSessionLocal() as session:
        yield session

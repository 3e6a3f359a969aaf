# This project was developed with assistance from AI tools.
"""Async engine, session factory, and the FastAPI session dependency.

Route handlers receive a session via ``Depends(get_db)``; scripts and the
seed CLI open their own ``SessionLocal()`` context. Both share one engine.
"""

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from .config import db_settings


class Base(DeclarativeBase):
    pass


engine = create_async_engine(
    db_settings.DATABASE_URL,
    echo=db_settings.SQL_ECHO,
    pool_size=db_settings.POOL_SIZE,
    pool_pre_ping=True,
)

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency: yield a session, closed when the request ends."""
    async with SessionLocal() as session:
        yield session

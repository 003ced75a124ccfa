"""
Database engine and session factory
"""
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from app.core.config import settings

Base = declarative_base()


def build_engine(database_url: str):
    """Create an async engine for the given URL."""
    return create_async_engine(database_url)


def build_session_factory(bind) -> async_sessionmaker:
    """Create a session factory bound to an engine."""
    return async_sessionmaker(bind=bind, class_=AsyncSession, expire_on_commit=False)


engine = build_engine(settings.DATABASE_URL)
AsyncSessionLocal = build_session_factory(engine)


async def init_db(bind=None) -> None:
    """Create all tables registered on Base.metadata."""
    # Import models so they're registered with Base.metadata
    import app.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


"""Engine and session factory shared by every unit of work."""

from typing import Any, AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.config import settings


def engine_options(url: str) -> dict[str, Any]:
    """Driver-specific engine arguments.

    SQLite (local development) has no server-side pool to ping and needs
    cross-thread access for aiosqlite.
    """
    if make_url(url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_async_engine(
    settings.async_database_url,
    echo=settings.debug,
    **engine_options(settings.async_database_url),
)

# Entities leave the session after commit, so nothing may expire on commit
async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session for request-scoped checks such as health checks."""
    async with async_session_factory() as session:
        yield session

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from flickly.infrastructure.config.settings import Settings
from flickly.infrastructure.persistence.models import table_registry


class _EngineStore:
    engine: Optional[AsyncEngine] = None


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for `settings.DATABASE_URL`.

    SQLite gets one shared connection so an in-memory database is visible to
    every session; server databases get a checked pool.
    """
    if settings.DATABASE_URL.startswith("sqlite"):
        return create_async_engine(
            settings.DATABASE_URL,
            echo=settings.DATABASE_ECHO,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, pool_pre_ping=True)


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.create_all)


def get_engine() -> AsyncEngine:
    if _EngineStore.engine is None:
        _EngineStore.engine = build_engine(Settings())
    return _EngineStore.engine


async def get_session():
    async with AsyncSession(get_engine(), expire_on_commit=False) as session:
        yield session


async def dispose_engine() -> None:
    if _EngineStore.engine is not None:
        await _EngineStore.engine.dispose()
        _EngineStore.engine = None

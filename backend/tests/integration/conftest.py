"""Shared fixtures: a throwaway SQLite database per test."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from business_site.infrastructure.database import Base

@pytest_asyncio.fixture
async def db_engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'site.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def add_rows(session_factory: async_sessionmaker[AsyncSession]):
    """Insert ORM rows directly, bypassing the services (explicit timestamps)."""

    async def _add(*models) -> None:
        async with session_factory() as session:
            session.add_all(models)
            await session.commit()

    return _add

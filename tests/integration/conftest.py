"""Fixtures backed by an in-memory SQLite database."""

from typing import AsyncIterator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from amcore.config import DatabaseConfig
from amcore.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    create_tables,
)

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = create_db_engine(DatabaseConfig(url=MEMORY_URL))
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async with create_session_factory(engine)() as session:
        yield session

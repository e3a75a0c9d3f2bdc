from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.db import build_engine
from app.db.models import Base
from app.db.repositories import DocumentRepository, UserRepository
from app.domains.identity.entities import User


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh in-memory SQLite schema per test."""
    engine = build_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def document_repository(db_session: AsyncSession) -> DocumentRepository:
    return DocumentRepository(db_session)


@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest_asyncio.fixture
async def owner(user_repository: UserRepository) -> User:
    user = User.create_user(username="owner", email="owner@example.com", password="Secret123")
    return await user_repository.create(user)


@pytest_asyncio.fixture
async def stranger(user_repository: UserRepository) -> User:
    user = User.create_user(username="stranger", email="stranger@example.com", password="Secret123")
    return await user_repository.create(user)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Full application; the lifespan creates the schema and the cache."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client

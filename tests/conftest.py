"""
Pytest fixtures for testing
"""
import os

# Settings are read at import time; point them at throwaway values first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import uuid
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from savings_tracker.main import app
from savings_tracker.core.auth import User, create_access_token
from savings_tracker.core.database import Base, get_async_session
from savings_tracker.crud.goal import create_goal
from savings_tracker.crud.transaction import append_transaction


@pytest.fixture
async def db_engine(tmp_path):
    """File-backed SQLite so concurrent sessions see each other's commits."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'savings.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


async def _make_user(db_session, email):
    user = User(
        id=uuid.uuid4(),
        email=email,
        hashed_password="not-a-real-hash",
        is_active=True,
        is_superuser=False,
        is_verified=True,
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.fixture
async def user(db_session):
    return await _make_user(db_session, "saver@example.com")


@pytest.fixture
async def other_user(db_session):
    return await _make_user(db_session, "someone.else@example.com")


@pytest.fixture
async def funded_goal(db_session, user):
    """Goal with target 500000 and a balance of 100000."""
    goal = await create_goal(user.id, "Laptop baru", Decimal("500000"), db_session)
    await append_transaction(user.id, goal.id, Decimal("100000"), "deposit", db_session)
    return goal


@pytest.fixture
async def client(session_factory):
    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}

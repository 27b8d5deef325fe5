"""
Shared fixtures — in-memory SQLite store, a fake repository and an HTTP client.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import itertools
from datetime import datetime, timezone
from typing import Dict, Optional

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from auth.exceptions import StorageError
from auth.repository import get_user_repository
from database.models import User
from database.session import init_models


class FakeUserRepository:
    """Dict-backed stand-in for ``UserRepository`` with a unique email index."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self.insert_calls = 0
        self._ids = itertools.count(1)

    async def find_by_email(self, email: str) -> Optional[User]:
        return self.users.get(email)

    async def insert(self, name: str, email: str, password_hash: str, role: str = "user") -> User:
        self.insert_calls += 1
        if email in self.users:
            raise StorageError()
        now = datetime.now(timezone.utc)
        user = User(
            id=next(self._ids),
            name=name,
            email=email,
            password=password_hash,
            role=role,
            created_at=now,
            updated_at=now,
        )
        self.users[email] = user
        return user


@pytest.fixture
def fake_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def app():
    from main import app as fastapi_app

    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app, fake_repo):
    app.dependency_overrides[get_user_repository] = lambda: fake_repo
    return TestClient(app, raise_server_exceptions=False)

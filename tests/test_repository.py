"""
Tests for ``UserRepository`` against an in-memory SQLite store.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import OperationalError

from auth.exceptions import StorageError
from auth.repository import UserRepository


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_insert_assigns_id_and_timestamp(self, db_session):
        repo = UserRepository(db_session)
        user = await repo.insert("Ann", "ann@example.com", "hash")

        assert user.id is not None
        assert user.created_at is not None
        assert user.role == "user"

    @pytest.mark.asyncio
    async def test_find_by_email(self, db_session):
        repo = UserRepository(db_session)
        await repo.insert("Ann", "ann@example.com", "hash", "admin")

        found = await repo.find_by_email("ann@example.com")
        assert found is not None
        assert found.name == "Ann"
        assert found.role == "admin"

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, db_session):
        repo = UserRepository(db_session)
        assert await repo.find_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_unique_violation_raises_storage_error(self, db_session):
        repo = UserRepository(db_session)
        await repo.insert("Ann", "ann@example.com", "hash")
        await db_session.commit()

        with pytest.raises(StorageError):
            await repo.insert("Other Ann", "ann@example.com", "hash2")

        # session is usable again after the failed flush
        found = await repo.find_by_email("ann@example.com")
        assert found is not None
        assert found.name == "Ann"

    @pytest.mark.asyncio
    async def test_lookup_failure_raises_storage_error(self):
        session = MagicMock()
        session.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("down")))
        repo = UserRepository(session)

        with pytest.raises(StorageError) as exc_info:
            await repo.find_by_email("ann@example.com")
        assert isinstance(exc_info.value.__cause__, OperationalError)


class TestSession:
    @pytest.mark.asyncio
    async def test_check_connection_returns_version(self, db_engine):
        from database.session import check_connection

        version = await check_connection(db_engine)
        assert version.split(".")[0].isdigit()

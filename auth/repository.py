"""
User persistence.

``UserRepository`` is constructed around an injected ``AsyncSession`` so the
flows in ``auth.service`` never reach for a global database handle.  Any
SQLAlchemy failure surfaces as ``StorageError``.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.exceptions import StorageError
from database.models import Role, User
from database.session import get_db_session

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> Optional[User]:
        """Return the user with ``email``, or ``None``."""
        try:
            result = await self._session.execute(
                select(User).where(User.email == email).limit(1)
            )
            return result.scalars().first()
        except SQLAlchemyError as exc:
            logger.error("User lookup failed: %s", exc)
            raise StorageError() from exc

    async def insert(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: str = Role.user.value,
    ) -> User:
        """Persist a new user and return it with ``id`` / ``created_at`` filled in."""
        user = User(name=name, email=email, password=password_hash, role=role)
        try:
            self._session.add(user)
            await self._session.flush()
            await self._session.refresh(user)
        except SQLAlchemyError as exc:
            logger.error("User insert failed for %s: %s", email, exc)
            await self._session.rollback()
            raise StorageError() from exc
        return user


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> UserRepository:
    """FastAPI dependency — one repository per request session."""
    return UserRepository(session)

"""
Registration and authentication flows.

Both flows take the repository as an argument and return a
``SanitizedUser``.  Expected outcomes (``DuplicateEmailError``,
``InvalidCredentialsError``) are raised for the HTTP layer to map; hashing
and storage faults propagate untouched.

Two concurrent sign-ups for the same email can both pass the existence check.
The unique index on ``users.email`` is what actually prevents the second row;
the loser surfaces as a ``StorageError``.
"""

from __future__ import annotations

import logging

from auth.exceptions import DuplicateEmailError, InvalidCredentialsError
from auth.password import hash_password, verify_password
from auth.repository import UserRepository
from auth.schemas import SanitizedUser
from database.models import Role

logger = logging.getLogger(__name__)


async def register(
    repo: UserRepository,
    name: str,
    email: str,
    password: str,
    role: str | Role | None = Role.user,
) -> SanitizedUser:
    """Create a user: uniqueness check → hash → insert → sanitized record."""
    existing = await repo.find_by_email(email)
    if existing is not None:
        logger.info("Registration rejected: email %s already in use", email)
        raise DuplicateEmailError()

    password_hash = await hash_password(password)

    role_value = Role(role or Role.user).value
    user = await repo.insert(name, email, password_hash, role_value)

    logger.info("User %s created successfully", user.email)
    return SanitizedUser.model_validate(user)


async def authenticate(repo: UserRepository, email: str, password: str) -> SanitizedUser:
    """
    Check ``email`` / ``password`` and return the sanitized user.

    Unknown email and wrong password raise the same ``InvalidCredentialsError``;
    only the log line tells them apart.
    """
    user = await repo.find_by_email(email)
    if user is None:
        logger.info("Authentication failed: user with email %s not found", email)
        raise InvalidCredentialsError()

    if not await verify_password(password, user.password):
        logger.info("Authentication failed: invalid password for email %s", email)
        raise InvalidCredentialsError()

    logger.info("User %s authenticated successfully", user.email)
    return SanitizedUser.model_validate(user)

"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic salting and a configurable
work factor (``config.bcrypt_rounds``).  bcrypt is CPU-bound, so both calls
run in a worker thread via ``asyncio.to_thread()`` and never block the event
loop.
"""

from __future__ import annotations

import asyncio
import logging

import bcrypt

from auth.exceptions import HashingError, VerificationError
from config.settings import config

logger = logging.getLogger(__name__)

MAX_PASSWORD_BYTES = 72  # bcrypt input limit


def _hash_sync(password: str, rounds: int) -> str:
    raw = password.encode("utf-8")
    if len(raw) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password exceeds {MAX_PASSWORD_BYTES} bytes")
    if b"\x00" in raw:
        raise ValueError("password contains a NUL byte")
    return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=rounds)).decode()


async def hash_password(password: str) -> str:
    """Hash a password with bcrypt (auto-salted)."""
    try:
        return await asyncio.to_thread(_hash_sync, password, config.bcrypt_rounds)
    except Exception as exc:
        logger.error("Error hashing the password: %s", exc)
        raise HashingError() from exc


async def verify_password(password: str, password_hash: str) -> bool:
    """
    Constant-time comparison against a bcrypt hash.

    A mismatch is ``False``; a hash bcrypt cannot parse is a
    ``VerificationError``.
    """
    raw = password.encode("utf-8")
    if len(raw) > MAX_PASSWORD_BYTES or b"\x00" in raw:
        # hash_password never stores such a password, so it cannot match
        return False
    try:
        return await asyncio.to_thread(bcrypt.checkpw, raw, password_hash.encode("utf-8"))
    except Exception as exc:
        logger.error("Error comparing password: %s", exc)
        raise VerificationError() from exc

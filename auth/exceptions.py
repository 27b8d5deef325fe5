"""
Error taxonomy for the auth flows.

Every error carries a ``kind`` so the HTTP layer can map it to a response
from a single table (see ``api.errors``).  ``message`` is the text that is
safe to show a client; internal detail travels only through ``__cause__``
and the logs.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_TOKEN = "invalid_token"
    HASHING = "hashing"
    VERIFICATION = "verification"
    STORAGE = "storage"


class AuthError(Exception):
    """Base class for every error raised by the auth package."""

    kind: ErrorKind
    message: str = "Authentication error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AuthError):
    kind = ErrorKind.VALIDATION
    message = "Validation failed"

    def __init__(self, details: Any = None) -> None:
        super().__init__()
        self.details = details


class DuplicateEmailError(AuthError):
    kind = ErrorKind.DUPLICATE_EMAIL
    message = "User with this email already exists"


class InvalidCredentialsError(AuthError):
    kind = ErrorKind.INVALID_CREDENTIALS
    message = "Invalid email or password"


class InvalidTokenError(AuthError):
    kind = ErrorKind.INVALID_TOKEN
    message = "Invalid or expired token"


class HashingError(AuthError):
    kind = ErrorKind.HASHING
    message = "Error hashing password"


class VerificationError(AuthError):
    kind = ErrorKind.VERIFICATION
    message = "Error comparing password"


class StorageError(AuthError):
    kind = ErrorKind.STORAGE
    message = "Error accessing user storage"

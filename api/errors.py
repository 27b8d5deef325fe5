"""
Exception → HTTP response mapping.

``ERROR_RESPONSES`` has one entry per ``ErrorKind``; the handlers below are
the only place status codes for auth errors are chosen.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from auth.exceptions import AuthError, ErrorKind, ValidationError
from utils.format import format_validation_errors

logger = logging.getLogger(__name__)

GENERIC_ERROR_BODY = {"error": "Internal server error"}

# kind → (status code, whether the error's public message is shown)
ERROR_RESPONSES: Dict[ErrorKind, Tuple[int, bool]] = {
    ErrorKind.VALIDATION: (status.HTTP_400_BAD_REQUEST, True),
    ErrorKind.DUPLICATE_EMAIL: (status.HTTP_409_CONFLICT, True),
    ErrorKind.INVALID_CREDENTIALS: (status.HTTP_401_UNAUTHORIZED, True),
    ErrorKind.INVALID_TOKEN: (status.HTTP_401_UNAUTHORIZED, True),
    ErrorKind.HASHING: (status.HTTP_500_INTERNAL_SERVER_ERROR, False),
    ErrorKind.VERIFICATION: (status.HTTP_500_INTERNAL_SERVER_ERROR, False),
    ErrorKind.STORAGE: (status.HTTP_500_INTERNAL_SERVER_ERROR, False),
}


def error_body(exc: AuthError) -> Tuple[int, Dict[str, Any]]:
    """Return the status code and JSON body for an auth error."""
    status_code, public = ERROR_RESPONSES[exc.kind]
    if not public:
        return status_code, dict(GENERIC_ERROR_BODY)
    if isinstance(exc, ValidationError):
        return status_code, {"error": exc.message, "details": exc.details}
    return status_code, {"message": exc.message}


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the auth, validation and catch-all handlers."""

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        status_code, body = error_body(exc)
        if status_code >= 500:
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc.kind.value,
                exc_info=exc,
            )
        else:
            logger.info("%s %s → %d %s", request.method, request.url.path, status_code, exc.kind.value)
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return await auth_error_handler(
            request, ValidationError(format_validation_errors(exc.errors()))
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=dict(GENERIC_ERROR_BODY),
        )

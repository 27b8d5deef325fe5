"""
FastAPI dependencies for authentication.

``get_current_claims`` accepts the session cookie first and falls back to an
``Authorization: Bearer`` header.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth.cookies import get_token_cookie
from auth.exceptions import InvalidTokenError
from auth.jwt import verify_token

_bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_claims(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
) -> Dict[str, Any]:
    """Verify the caller's session token and return its claims."""
    token = get_token_cookie(request)
    if not token and credentials is not None:
        token = credentials.credentials
    if not token:
        raise InvalidTokenError()
    return verify_token(token)

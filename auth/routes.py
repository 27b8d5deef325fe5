"""
Auth API routes — sign-up, sign-in, sign-out, me.

Route prefix: /api/auth
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Response, status

from auth.cookies import clear_token_cookie, set_token_cookie
from auth.dependencies import get_current_claims
from auth.jwt import claims_for, create_token
from auth.repository import UserRepository, get_user_repository
from auth.schemas import (
    AuthResponse,
    MeResponse,
    MessageResponse,
    PublicUser,
    SanitizedUser,
    SignInRequest,
    SignUpRequest,
)
from auth.service import authenticate, register

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _issue_session(response: Response, user: SanitizedUser) -> None:
    set_token_cookie(response, create_token(claims_for(user)))


def _public(user: SanitizedUser) -> PublicUser:
    return PublicUser(id=user.id, name=user.name, email=user.email, role=user.role)


@router.post("/sign-up", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(
    req: SignUpRequest,
    response: Response,
    repo: UserRepository = Depends(get_user_repository),
) -> AuthResponse:
    """Register a new user and start a session."""
    user = await register(repo, req.name, req.email, req.password, req.role)
    _issue_session(response, user)

    logger.info("User registered successfully: %s", user.email)
    return AuthResponse(message="User registered", user=_public(user))


@router.post("/sign-in", response_model=AuthResponse)
async def sign_in(
    req: SignInRequest,
    response: Response,
    repo: UserRepository = Depends(get_user_repository),
) -> AuthResponse:
    """Login with email + password."""
    user = await authenticate(repo, req.email, req.password)
    _issue_session(response, user)

    logger.info("User signed in successfully: %s", user.email)
    return AuthResponse(message="User signed in", user=_public(user))


@router.post("/sign-out", response_model=MessageResponse)
async def sign_out(response: Response) -> MessageResponse:
    clear_token_cookie(response)
    return MessageResponse(message="User signed out")


@router.get("/me", response_model=MeResponse)
async def me(claims: Dict[str, Any] = Depends(get_current_claims)) -> MeResponse:
    return MeResponse(user=claims)

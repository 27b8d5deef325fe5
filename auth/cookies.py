"""
Session cookie helpers.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Request, Response

from config.settings import config


def set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=config.cookie_name,
        value=token,
        max_age=config.cookie_max_age_seconds,
        path="/",
        httponly=True,
        secure=config.secure_cookies,
        samesite=config.cookie_samesite,
    )


def clear_token_cookie(response: Response) -> None:
    response.delete_cookie(
        key=config.cookie_name,
        path="/",
        httponly=True,
        secure=config.secure_cookies,
        samesite=config.cookie_samesite,
    )


def get_token_cookie(request: Request) -> Optional[str]:
    return request.cookies.get(config.cookie_name)

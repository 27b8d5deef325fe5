"""
JWT-style session token creation and verification.

Tokens are URL-safe base64-encoded JSON payloads signed with HMAC-SHA256.
Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Any, Dict

from auth.exceptions import InvalidTokenError
from auth.schemas import SanitizedUser
from config.settings import config

_RESERVED = ("iat", "exp")


def _sign(raw: bytes) -> str:
    return hmac.new(config.jwt_secret.encode(), raw, hashlib.sha256).hexdigest()


def claims_for(user: SanitizedUser) -> Dict[str, Any]:
    """Identity claims embedded in a session token."""
    return {"id": user.id, "email": user.email, "role": user.role}


def create_token(claims: Dict[str, Any]) -> str:
    """Create a signed token containing ``claims`` plus issue/expiry times."""
    now = int(time.time())
    payload = {**claims, "iat": now, "exp": now + config.jwt_expiry_seconds}
    raw = json.dumps(payload, separators=(",", ":"), sort_keys=True).encode()
    # unpadded so the token is a valid bare cookie value
    return urlsafe_b64encode(raw).rstrip(b"=").decode() + "." + _sign(raw)


def verify_token(token: str) -> Dict[str, Any]:
    """
    Verify ``token`` and return the claims it was created with.

    Raises ``InvalidTokenError`` on bad format, bad signature or expiry.
    """
    parts = token.split(".", 1) if token else []
    if len(parts) != 2:
        raise InvalidTokenError()
    try:
        encoded = parts[0].encode()
        raw = urlsafe_b64decode(encoded + b"=" * (-len(encoded) % 4))
    except (binascii.Error, ValueError) as exc:
        raise InvalidTokenError() from exc
    if not hmac.compare_digest(parts[1].encode(), _sign(raw).encode()):
        raise InvalidTokenError()
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise InvalidTokenError() from exc
    if not isinstance(payload, dict) or payload.get("exp", 0) < time.time():
        raise InvalidTokenError()
    return {k: v for k, v in payload.items() if k not in _RESERVED}

"""
Tests for session token signing and verification.
"""

import pytest

from auth.exceptions import InvalidTokenError
from auth.jwt import claims_for, create_token, verify_token
from auth.schemas import SanitizedUser
from config.settings import config

CLAIMS = {"id": 7, "email": "ann@example.com", "role": "user"}


class TestTokens:
    def test_round_trip_recovers_claims(self):
        assert verify_token(create_token(CLAIMS)) == CLAIMS

    def test_token_is_a_bare_cookie_value(self):
        for n in range(4):
            token = create_token({**CLAIMS, "email": "a" * n + "@example.com"})
            assert "=" not in token
            assert verify_token(token)["email"] == "a" * n + "@example.com"

    def test_claims_for_user(self):
        user = SanitizedUser(id=7, name="Ann", email="ann@example.com", role="user")
        assert claims_for(user) == CLAIMS

    def test_tampered_payload_rejected(self):
        token = create_token(CLAIMS)
        forged = create_token({**CLAIMS, "role": "admin"})
        mixed = forged.split(".")[0] + "." + token.split(".")[1]
        with pytest.raises(InvalidTokenError):
            verify_token(mixed)

    def test_tampered_signature_rejected(self):
        token = create_token(CLAIMS)
        payload, sig = token.split(".")
        bad_sig = ("0" if sig[0] != "0" else "1") + sig[1:]
        with pytest.raises(InvalidTokenError):
            verify_token(f"{payload}.{bad_sig}")

    def test_other_secret_rejected(self, monkeypatch):
        token = create_token(CLAIMS)
        monkeypatch.setattr(config, "jwt_secret", "another-secret")
        with pytest.raises(InvalidTokenError):
            verify_token(token)

    def test_expired_token_rejected(self, monkeypatch):
        monkeypatch.setattr(config, "jwt_expiry_seconds", -10)
        token = create_token(CLAIMS)
        with pytest.raises(InvalidTokenError):
            verify_token(token)

    @pytest.mark.parametrize("garbage", ["", "no-dot", "a.b", "!!!.???"])
    def test_garbage_rejected(self, garbage):
        with pytest.raises(InvalidTokenError):
            verify_token(garbage)

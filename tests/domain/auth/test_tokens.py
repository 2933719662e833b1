"""Tests for password hashing and bearer tokens."""

from datetime import timedelta

import jwt

from app.app_config import get_app_environ_config
from app.domain.auth.passwords import hash_password, verify_password
from app.domain.auth.tokens import FAMILY_ROLE, TokenClaims, decode_token, issue_token
from app.domain.utils.clock import utc_now


class TestPasswords:
    def test_hash_and_verify(self):
        password_hash = hash_password("secret123")

        assert password_hash != "secret123"
        assert verify_password(password_hash, "secret123") is True
        assert verify_password(password_hash, "wrong") is False

    def test_missing_hash_never_verifies(self):
        assert verify_password(None, "secret123") is False
        assert verify_password(hash_password("x" * 8), "") is False


class TestTokens:
    def test_issue_and_decode(self):
        claims = TokenClaims(id="abc", role="admin", username="priest", email="p@x.org")

        decoded = decode_token(issue_token(claims))

        assert decoded == claims

    def test_family_claims(self):
        claims = TokenClaims(id="fam1", role=FAMILY_ROLE, phone="9876543210")
        decoded = decode_token(issue_token(claims))
        assert decoded is not None
        assert decoded.role == FAMILY_ROLE
        assert decoded.phone == "9876543210"

    def test_garbage_token(self):
        assert decode_token("not.a.token") is None

    def test_wrong_secret(self):
        token = jwt.encode({"id": "abc", "role": "admin"}, "other-secret", algorithm="HS256")
        assert decode_token(token) is None

    def test_expired_token(self):
        cfg = get_app_environ_config()
        payload = {"id": "abc", "role": "admin", "exp": utc_now() - timedelta(minutes=1)}
        token = jwt.encode(payload, cfg.JWT_SECRET, algorithm=cfg.JWT_ALGORITHM)
        assert decode_token(token) is None

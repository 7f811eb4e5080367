"""Tests for admin session token management."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from coins_api.auth.jwt import ADMIN_ROLE, create_session_token, verify_session_token

SECRET = "unit-test-secret-0123456789abcdef0123456789abcdef"


class TestSessionToken:
    def test_create_and_verify(self):
        token = create_session_token("admin@coins.test", SECRET)
        payload = verify_session_token(token, SECRET)
        assert payload["email"] == "admin@coins.test"
        assert payload["role"] == ADMIN_ROLE

    def test_default_expiry_is_eight_hours(self):
        token = create_session_token("admin@coins.test", SECRET)
        payload = verify_session_token(token, SECRET)
        assert payload["exp"] - payload["iat"] == 8 * 60 * 60

    def test_wrong_secret_rejected(self):
        token = create_session_token("admin@coins.test", SECRET)
        with pytest.raises(jwt.InvalidTokenError):
            verify_session_token(token, SECRET + "-other")

    def test_expired_token_rejected(self):
        token = create_session_token("admin@coins.test", SECRET, expire_minutes=-1)
        with pytest.raises(jwt.InvalidTokenError):
            verify_session_token(token, SECRET)

    def test_tampered_signature_rejected(self):
        token = create_session_token("admin@coins.test", SECRET)
        header, payload, signature = token.split(".")
        flipped = "A" if signature[0] != "A" else "B"
        with pytest.raises(jwt.InvalidTokenError):
            verify_session_token(f"{header}.{payload}.{flipped}{signature[1:]}", SECRET)

    def test_tampered_payload_rejected(self):
        token = create_session_token("admin@coins.test", SECRET)
        other = create_session_token("someone@else.test", SECRET)
        header, _, signature = token.split(".")
        forged = f"{header}.{other.split('.')[1]}.{signature}"
        with pytest.raises(jwt.InvalidTokenError):
            verify_session_token(forged, SECRET)

    def test_non_admin_role_rejected(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"email": "user@coins.test", "role": "user", "iat": now, "exp": now + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(jwt.InvalidTokenError, match="admin identity"):
            verify_session_token(token, SECRET)

    def test_missing_email_claim_rejected(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode({"role": "admin", "exp": now + timedelta(minutes=5)}, SECRET, algorithm="HS256")
        with pytest.raises(jwt.InvalidTokenError):
            verify_session_token(token, SECRET)

    def test_garbage_rejected(self):
        with pytest.raises(jwt.InvalidTokenError):
            verify_session_token("not-a-token", SECRET)

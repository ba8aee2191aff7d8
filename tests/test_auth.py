"""Tests for password hashing, session tokens and the auth gate."""

import jwt
import pytest
from datetime import datetime, timedelta, timezone

from auth import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    resolve_user_id,
    verify_password,
)
from config import ALGORITHM, SECRET_KEY
from errors import AuthError


class TestPasswordHashing:
    def test_hash_is_bcrypt_with_eight_rounds(self):
        hashed = get_password_hash("password1")
        assert hashed.startswith("$2b$08$")
        assert hashed != "password1"

    def test_verify_password(self):
        hashed = get_password_hash("password1")
        assert verify_password("password1", hashed)
        assert not verify_password("password2", hashed)

    def test_hash_is_salted(self):
        assert get_password_hash("password1") != get_password_hash("password1")


class TestSessionToken:
    def test_token_carries_user_id_and_expiry(self):
        token = create_access_token(42)
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        assert payload["id"] == "42"
        assert "exp" in payload
        assert "iat" in payload

    def test_custom_expiry(self):
        token = create_access_token(1, expires_delta=timedelta(hours=2))
        payload = decode_access_token(token)
        assert 7100 < payload["exp"] - payload["iat"] < 7300

    def test_decode_expired_token(self):
        token = create_access_token(1, expires_delta=timedelta(seconds=-1))
        assert decode_access_token(token) is None

    def test_decode_garbage(self):
        assert decode_access_token("invalid.token.here") is None

    def test_decode_rejects_token_without_expiry(self):
        token = jwt.encode({"id": "1"}, SECRET_KEY, algorithm=ALGORITHM)
        assert decode_access_token(token) is None


class TestAuthGate:
    def test_resolves_user_id(self):
        assert resolve_user_id(create_access_token(7)) == 7

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token(self, token):
        with pytest.raises(AuthError):
            resolve_user_id(token)

    def test_wrong_signing_key(self):
        expire = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"id": "1", "exp": expire}, "some-other-key", algorithm=ALGORITHM)
        with pytest.raises(AuthError):
            resolve_user_id(token)

    def test_payload_without_id(self):
        expire = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"sub": "1", "exp": expire}, SECRET_KEY, algorithm=ALGORITHM)
        with pytest.raises(AuthError):
            resolve_user_id(token)

    def test_payload_with_non_numeric_id(self):
        expire = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"id": "abc", "exp": expire}, SECRET_KEY, algorithm=ALGORITHM)
        with pytest.raises(AuthError):
            resolve_user_id(token)

    def test_expired_token(self):
        token = create_access_token(1, expires_delta=timedelta(seconds=-1))
        with pytest.raises(AuthError):
            resolve_user_id(token)

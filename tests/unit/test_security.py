"""
Unit tests for devconnect.core.security
"""
import time

import jwt
import pytest
from devconnect.core.security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
)


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123")
        assert result != "secret123"


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestJwtToken:
    """Tests for create_jwt_token and decode_jwt_token"""

    def test_create_and_decode_roundtrip(self, mock_settings):
        payload = {"sub": "user-123", "email": "test@example.com"}
        token = create_jwt_token(payload)
        decoded = decode_jwt_token(token)
        assert decoded["sub"] == "user-123"
        assert decoded["email"] == "test@example.com"
        assert decoded["exp"] - decoded["iat"] == 600 * 60

    def test_tampered_token_raises(self, mock_settings):
        token = create_jwt_token({"sub": "user-123"})
        with pytest.raises(ValueError, match="Invalid token"):
            decode_jwt_token(token[:-2] + ("aa" if not token.endswith("aa") else "bb"))

    def test_wrong_secret_raises(self, mock_settings):
        token = jwt.encode({"sub": "user-123"}, "some-other-secret", algorithm="HS256")
        with pytest.raises(ValueError, match="Invalid token"):
            decode_jwt_token(token)

    def test_expired_token_raises(self, mock_settings):
        now = int(time.time())
        token = jwt.encode(
            {"sub": "user-123", "iat": now - 120, "exp": now - 60},
            mock_settings.jwt_secret_key,
            algorithm="HS256",
        )
        with pytest.raises(ValueError, match="Invalid token"):
            decode_jwt_token(token)

    def test_garbage_raises(self, mock_settings):
        with pytest.raises(ValueError):
            decode_jwt_token("not.a.jwt")

"""
Tests for password hashing and session tokens (app.core.security).
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from app.core.exceptions import InvalidTokenError
from app.core.security import PasswordHasher, TokenService, is_token_expired


CLAIMS = {
    "id": "507f1f77bcf86cd799439011",
    "username": "testuser",
    "email": "testuser@example.com",
}


# =============================================================================
# Password Hashing Tests
# =============================================================================

class TestPasswordHashing:
    """Tests for PasswordHasher."""

    def test_hash_returns_bcrypt_hash(self, password_hasher):
        """hash should return a bcrypt digest, not the plaintext."""
        hashed = password_hasher.hash("TestPassword123!")

        assert hashed.startswith("$2b$")
        assert hashed != "TestPassword123!"

    def test_hash_embeds_cost_factor(self):
        """The configured cost factor should appear in the digest."""
        hasher = PasswordHasher(rounds=5)

        assert hasher.hash("TestPassword123!").startswith("$2b$05$")

    def test_verify_correct_password_returns_true(self, password_hasher):
        hashed = password_hasher.hash("TestPassword123!")

        assert password_hasher.verify("TestPassword123!", hashed) is True

    def test_verify_wrong_password_returns_false(self, password_hasher):
        hashed = password_hasher.hash("TestPassword123!")

        assert password_hasher.verify("WrongPassword123!", hashed) is False

    def test_hash_different_each_time_but_both_verify(self, password_hasher):
        """Same password should produce different hashes (salt)."""
        hash1 = password_hasher.hash("TestPassword123!")
        hash2 = password_hasher.hash("TestPassword123!")

        assert hash1 != hash2
        assert password_hasher.verify("TestPassword123!", hash1)
        assert password_hasher.verify("TestPassword123!", hash2)

    def test_verify_garbage_digest_returns_false(self, password_hasher):
        assert password_hasher.verify("TestPassword123!", "not-a-hash") is False


# =============================================================================
# Token Tests
# =============================================================================

class TestTokenService:
    """Tests for TokenService issue/verify."""

    def test_issue_and_verify_returns_claims(self, token_service):
        token = token_service.issue(CLAIMS)

        payload = token_service.verify(token)

        assert payload["id"] == CLAIMS["id"]
        assert payload["username"] == CLAIMS["username"]
        assert payload["email"] == CLAIMS["email"]
        assert payload["exp"] - payload["iat"] == 3600

    def test_token_accepted_at_59_minutes(self, token_service):
        issued = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        token = token_service.issue(CLAIMS, now=issued)

        payload = token_service.verify(token, now=issued + timedelta(minutes=59))

        assert payload["id"] == CLAIMS["id"]

    def test_token_rejected_at_61_minutes(self, token_service):
        issued = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        token = token_service.issue(CLAIMS, now=issued)

        with pytest.raises(InvalidTokenError):
            token_service.verify(token, now=issued + timedelta(minutes=61))

    def test_expiry_is_exact_cutoff(self, token_service):
        issued = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        token = token_service.issue(CLAIMS, now=issued)
        expiry = issued + timedelta(hours=1)

        assert token_service.verify(token, now=expiry)["id"] == CLAIMS["id"]
        with pytest.raises(InvalidTokenError):
            token_service.verify(token, now=expiry + timedelta(seconds=1))

    def test_token_signed_with_other_key_rejected(self, token_service):
        forged = TokenService(secret_key="some-other-key").issue(CLAIMS)

        with pytest.raises(InvalidTokenError):
            token_service.verify(forged)

    def test_tampered_token_rejected(self, token_service):
        token = token_service.issue(CLAIMS)
        header, payload, signature = token.split(".")
        tampered = ".".join([header, payload, signature[::-1]])

        with pytest.raises(InvalidTokenError):
            token_service.verify(tampered)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token_rejected(self, token_service, token):
        with pytest.raises(InvalidTokenError):
            token_service.verify(token)

    def test_token_without_identity_claims_rejected(self, token_service):
        token = jwt.encode(
            {"sub": "someone", "exp": 9999999999},
            token_service.secret_key,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            token_service.verify(token)

    def test_token_without_expiry_rejected(self, token_service):
        token = jwt.encode(dict(CLAIMS), token_service.secret_key, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            token_service.verify(token)

    def test_missing_secret_key_refused(self):
        with pytest.raises(ValueError):
            TokenService(secret_key="")

    def test_expires_in_seconds(self, token_service):
        assert token_service.expires_in == 3600


class TestIsTokenExpired:
    """Tests for the expiry helper."""

    def test_missing_exp_is_expired(self):
        assert is_token_expired({}) is True

    def test_future_exp_not_expired(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        exp = int((now + timedelta(minutes=1)).timestamp())

        assert is_token_expired({"exp": exp}, now=now) is False

    def test_past_exp_expired(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        exp = int((now - timedelta(minutes=1)).timestamp())

        assert is_token_expired({"exp": exp}, now=now) is True

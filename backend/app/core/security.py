"""
Security utilities for password hashing and JWT token management.
"""
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings
from app.core.exceptions import InvalidTokenError

# Claims that identify the session owner
IDENTITY_CLAIMS = ("id", "username", "email")


class PasswordHasher:
    """One-way bcrypt hashing with a configurable cost factor."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain password using bcrypt.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string (salt and cost are embedded)
        """
        return self.context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a hashed password.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The hashed password to compare against

        Returns:
            True if password matches, False otherwise
        """
        try:
            return self.context.verify(plain_password, hashed_password)
        except ValueError:
            # Not a recognised bcrypt digest
            return False


class TokenService:
    """Issues and verifies signed, time-limited session tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
    ):
        if not secret_key:
            raise ValueError("A JWT signing key is required")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expire_minutes)

    @property
    def expires_in(self) -> int:
        """Token validity window in seconds."""
        return int(self.expires_delta.total_seconds())

    def issue(self, claims: dict[str, Any], now: Optional[datetime] = None) -> str:
        """
        Create a JWT access token.

        Args:
            claims: Identity claims: id, username and email
            now: Issue time, defaults to the current UTC time

        Returns:
            Encoded JWT token string
        """
        issued_at = now or datetime.now(timezone.utc)
        expire = issued_at + self.expires_delta

        payload = {key: str(claims[key]) for key in IDENTITY_CLAIMS}
        payload["iat"] = int(issued_at.timestamp())
        payload["exp"] = int(expire.timestamp())

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str, now: Optional[datetime] = None) -> dict[str, Any]:
        """
        Decode and validate a JWT token.

        Args:
            token: The JWT token string to decode
            now: Time to check expiry against, defaults to the current UTC time

        Returns:
            Decoded payload dictionary with keys: id, username, email, iat, exp

        Raises:
            InvalidTokenError: If token is forged, malformed or expired
        """
        try:
            # Expiry is checked below so that it is an exact cutoff
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        if any(not payload.get(key) for key in IDENTITY_CLAIMS):
            raise InvalidTokenError("Token is missing identity claims")

        if is_token_expired(payload, now):
            raise InvalidTokenError("Token has expired")

        return payload


def is_token_expired(payload: dict[str, Any], now: Optional[datetime] = None) -> bool:
    """
    Check if a decoded token payload is expired.

    Args:
        payload: Decoded JWT payload
        now: Reference time, defaults to the current UTC time

    Returns:
        True if expired, False otherwise
    """
    exp = payload.get("exp")
    if not isinstance(exp, (int, float)):
        return True
    now = now or datetime.now(timezone.utc)
    return now > datetime.fromtimestamp(exp, tz=timezone.utc)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide password hasher built from settings."""
    return PasswordHasher(rounds=get_settings().password_hash_rounds)


@lru_cache
def get_token_service() -> TokenService:
    """Get the process-wide token service built from settings."""
    settings = get_settings()
    return TokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.jwt_access_token_expire_minutes,
    )

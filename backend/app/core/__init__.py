"""
Core module - Security, error types and logging setup.
"""
from app.core.exceptions import (
    BadRequestError,
    ConflictError,
    FieldError,
    InvalidTokenError,
    NotFoundError,
    ServiceError,
    ValidationFailedError,
)
from app.core.security import (
    PasswordHasher,
    TokenService,
    get_password_hasher,
    get_token_service,
)

__all__ = [
    "BadRequestError",
    "ConflictError",
    "FieldError",
    "InvalidTokenError",
    "NotFoundError",
    "ServiceError",
    "ValidationFailedError",
    "PasswordHasher",
    "TokenService",
    "get_password_hasher",
    "get_token_service",
]

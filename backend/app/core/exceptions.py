"""
Error taxonomy shared by services and repositories.

Services raise these at the point of detection; the application-level
handler in app.main turns them into HTTP responses.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import status


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure."""
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ServiceError(Exception):
    """Base class for business-rule failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConflictError(ServiceError):
    """Duplicate unique field or duplicate interest."""
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(ServiceError):
    """Missing identity, missing interest or rejected login."""
    status_code = status.HTTP_404_NOT_FOUND


class BadRequestError(ServiceError):
    """Input that breaks a business rule."""
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationFailedError(BadRequestError):
    """Input rejected by one of the validation functions."""

    def __init__(self, errors: list[FieldError], message: Optional[str] = None):
        super().__init__(message or "; ".join(e.message for e in errors))
        self.errors = errors


class InvalidTokenError(Exception):
    """Session token is malformed, forged or expired."""

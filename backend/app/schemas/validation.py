"""
Explicit request validation.

Each function returns a list of field-level errors; an empty list means
the input may be handed to the service layer.
"""
from email_validator import EmailNotValidError, validate_email

from app.core.exceptions import FieldError, ValidationFailedError
from app.models.user import Gender
from app.schemas.auth import CreateProfileRequest, LoginRequest, RegisterRequest
from app.schemas.user import ProfileUpdate

MIN_PASSWORD_LENGTH = 6


def _check_email(email: str) -> list[FieldError]:
    if not email or not email.strip():
        return [FieldError("email", "email should not be empty")]
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return [FieldError("email", "email must be an email")]
    return []


def _check_password(password: str, field: str = "password") -> list[FieldError]:
    if not password:
        return [FieldError(field, f"{field} should not be empty")]
    if len(password) < MIN_PASSWORD_LENGTH:
        return [FieldError(
            field,
            f"{field} must be longer than or equal to {MIN_PASSWORD_LENGTH} characters",
        )]
    return []


def _check_username(username: str) -> list[FieldError]:
    if not username or not username.strip():
        return [FieldError("username", "username should not be empty")]
    return []


def validate_registration(body: RegisterRequest) -> list[FieldError]:
    errors = _check_username(body.username)
    errors += _check_email(body.email)
    errors += _check_password(body.password)
    errors += _check_password(body.confirm_password, field="confirmPassword")
    return errors


def validate_profile_creation(body: CreateProfileRequest) -> list[FieldError]:
    return (
        _check_username(body.username)
        + _check_email(body.email)
        + _check_password(body.password)
    )


def validate_login(body: LoginRequest) -> list[FieldError]:
    return _check_email(body.email) + _check_password(body.password)


def validate_profile_update(body: ProfileUpdate) -> list[FieldError]:
    errors: list[FieldError] = []
    changes = body.changes()

    gender = changes.get("gender")
    if gender is not None and gender not in {g.value for g in Gender}:
        errors.append(FieldError("gender", 'Invalid gender. Must be "male" or "female".'))

    for field in ("height", "weight"):
        value = changes.get(field)
        if value is not None and value < 0:
            errors.append(FieldError(field, f"{field} must not be negative"))

    interests = changes.get("interests")
    if interests is not None:
        if any(not item or not item.strip() for item in interests):
            errors.append(FieldError("interests", "each value in interests should not be empty"))

    return errors


def validate_interest(interest: str) -> list[FieldError]:
    if not interest or not interest.strip():
        return [FieldError("interest", "interest should not be empty")]
    return []


def ensure_valid(errors: list[FieldError]) -> None:
    """Raise ValidationFailedError when any errors were collected."""
    if errors:
        raise ValidationFailedError(errors)

"""
Authentication service for registration and login.
"""
import logging

from app.core.exceptions import (
    ConflictError,
    FieldError,
    NotFoundError,
    ValidationFailedError,
)
from app.core.security import PasswordHasher, TokenService
from app.models.user import User
from app.repositories.base import DUPLICATE_IDENTITY, UserRepository
from app.schemas.auth import (
    CreateProfileRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from app.schemas.validation import (
    ensure_valid,
    validate_login,
    validate_profile_creation,
    validate_registration,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
PASSWORDS_DO_NOT_MATCH = "Passwords do not match"


class AuthService:
    """Service for authentication operations."""

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    async def register(self, request: RegisterRequest) -> User:
        """
        Register a new user.

        Args:
            request: Registration request with username, email and passwords

        Returns:
            The created identity with an empty profile

        Raises:
            ValidationFailedError: If fields are invalid or passwords don't match
            ConflictError: If the username or email is already in use

        Duplicates are reported before a password mismatch.
        """
        ensure_valid(validate_registration(request))
        await self._ensure_unique(request.username, request.email)

        if not request.passwords_match():
            raise ValidationFailedError(
                [FieldError("confirmPassword", PASSWORDS_DO_NOT_MATCH)],
                PASSWORDS_DO_NOT_MATCH,
            )

        user = await self._store_identity(request.username, request.email, request.password)
        logger.info("Registered user %s (%s)", user.username, user.id)
        return user

    async def create_profile(self, request: CreateProfileRequest) -> User:
        """
        Create an identity through POST /user/profile.

        Same uniqueness rule as register, but there is no password
        confirmation and no token is issued.
        """
        ensure_valid(validate_profile_creation(request))
        await self._ensure_unique(request.username, request.email)
        user = await self._store_identity(request.username, request.email, request.password)
        logger.info("Created profile for user %s (%s)", user.username, user.id)
        return user

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return JWT token.

        Unknown emails and wrong passwords are rejected identically.

        Raises:
            ValidationFailedError: If the body is malformed
            NotFoundError: If credentials are invalid
        """
        ensure_valid(validate_login(request))

        try:
            user = await self.users.find_by_email(request.email)
        except NotFoundError:
            logger.info("Login failed for %s", request.email)
            raise NotFoundError(INVALID_CREDENTIALS) from None

        if not self.hasher.verify(request.password, user.hashed_password):
            logger.info("Login failed for %s", request.email)
            raise NotFoundError(INVALID_CREDENTIALS)

        token = self.tokens.issue(
            {"id": user.id, "username": user.username, "email": user.email}
        )
        logger.info("User %s logged in", user.id)
        return LoginResponse(token=token)

    async def _ensure_unique(self, username: str, email: str) -> None:
        if await self.users.exists(username, email):
            raise ConflictError(DUPLICATE_IDENTITY)

    async def _store_identity(self, username: str, email: str, password: str) -> User:
        hashed_password = self.hasher.hash(password)
        return await self.users.create(username, email, hashed_password)

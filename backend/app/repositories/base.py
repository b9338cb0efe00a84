"""
Repository interface for user identities and profiles.
"""
from abc import ABC, abstractmethod

from app.models.user import User

DUPLICATE_IDENTITY = "Username or email is already in use"


class UserRepository(ABC):
    """Data access contract for User documents."""

    @abstractmethod
    async def create(self, username: str, email: str, hashed_password: str) -> User:
        """
        Insert a new identity with an empty profile.

        Raises:
            ConflictError: If the username or email is already taken
        """

    @abstractmethod
    async def exists(self, username: str, email: str) -> bool:
        """True if any identity uses this username or this email."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> User:
        """
        Raises:
            NotFoundError: If no identity has this id
        """

    @abstractmethod
    async def find_by_email(self, email: str) -> User:
        """
        Raises:
            NotFoundError: If no identity has this email
        """

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Persist the full current state of an existing user.

        Raises:
            NotFoundError: If the user no longer exists
        """

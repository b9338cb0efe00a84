"""
In-memory implementation of the user repository.
"""
from bson import ObjectId

from app.core.exceptions import ConflictError, NotFoundError
from app.models.user import User, utc_now
from app.repositories.base import DUPLICATE_IDENTITY, UserRepository


class InMemoryUserRepository(UserRepository):
    """Dict-backed store, for tests and local runs without MongoDB."""

    def __init__(self):
        self._users: dict[str, User] = {}

    async def create(self, username: str, email: str, hashed_password: str) -> User:
        if await self.exists(username, email):
            raise ConflictError(DUPLICATE_IDENTITY)

        user = User(
            id=str(ObjectId()),
            username=username,
            email=email,
            hashed_password=hashed_password,
        )
        self._users[user.id] = user
        return user.model_copy(deep=True)

    async def exists(self, username: str, email: str) -> bool:
        return any(
            u.username == username or u.email == email
            for u in self._users.values()
        )

    async def find_by_id(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user.model_copy(deep=True)

    async def find_by_email(self, email: str) -> User:
        for user in self._users.values():
            if user.email == email:
                return user.model_copy(deep=True)
        raise NotFoundError("User not found")

    async def save(self, user: User) -> User:
        if user.id not in self._users:
            raise NotFoundError("User not found")
        user.updated_at = utc_now()
        self._users[user.id] = user.model_copy(deep=True)
        return user

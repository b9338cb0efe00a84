"""
MongoDB implementation of the user repository.
"""
import logging

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError, NotFoundError
from app.database.databases import profile_db
from app.models.user import User, utc_now
from app.repositories.base import DUPLICATE_IDENTITY, UserRepository

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """Stores users in the profile_db.users collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.users_collection = db[profile_db.Collections.USERS]

    async def create(self, username: str, email: str, hashed_password: str) -> User:
        if await self.exists(username, email):
            raise ConflictError(DUPLICATE_IDENTITY)

        user = User(username=username, email=email, hashed_password=hashed_password)
        try:
            result = await self.users_collection.insert_one(user.to_document())
        except DuplicateKeyError as e:
            # Lost a race against a concurrent registration
            logger.warning("Duplicate key on insert for %s / %s", username, email)
            raise ConflictError(DUPLICATE_IDENTITY) from e

        user.id = str(result.inserted_id)
        return user

    async def exists(self, username: str, email: str) -> bool:
        existing = await self.users_collection.find_one(
            {"$or": [{"username": username}, {"email": email}]},
            projection={"_id": 1},
        )
        return existing is not None

    async def find_by_id(self, user_id: str) -> User:
        if not user_id or not ObjectId.is_valid(user_id):
            raise NotFoundError("User not found")

        user_doc = await self.users_collection.find_one({"_id": ObjectId(user_id)})
        if not user_doc:
            raise NotFoundError("User not found")
        return User.from_document(user_doc)

    async def find_by_email(self, email: str) -> User:
        user_doc = await self.users_collection.find_one({"email": email})
        if not user_doc:
            raise NotFoundError("User not found")
        return User.from_document(user_doc)

    async def save(self, user: User) -> User:
        if not user.id or not ObjectId.is_valid(user.id):
            raise NotFoundError("User not found")

        user.updated_at = utc_now()
        result = await self.users_collection.replace_one(
            {"_id": ObjectId(user.id)},
            user.to_document(),
        )
        if result.matched_count == 0:
            raise NotFoundError("User not found")
        return user

"""
Service dependencies wired from the configured database and settings.
"""
from fastapi import Depends

from app.core.security import (
    PasswordHasher,
    TokenService,
    get_password_hasher,
    get_token_service,
)
from app.database.connections import get_database
from app.repositories.base import UserRepository
from app.repositories.mongo import MongoUserRepository
from app.services.auth_service import AuthService
from app.services.profile_service import ProfileService
from app.services.storage import LocalImageStorage, get_image_storage


async def get_user_repository() -> UserRepository:
    """Dependency to get the MongoDB-backed user repository."""
    db = await get_database()
    return MongoUserRepository(db)


async def get_auth_service(
    users: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(users, hasher, tokens)


async def get_profile_service(
    users: UserRepository = Depends(get_user_repository),
    storage: LocalImageStorage = Depends(get_image_storage),
) -> ProfileService:
    """Dependency to get ProfileService instance."""
    return ProfileService(users, storage)

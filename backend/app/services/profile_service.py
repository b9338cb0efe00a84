"""
Profile service: partial profile updates and interest management.
"""
import logging
from typing import Optional

from app.core.exceptions import ConflictError, NotFoundError
from app.models.user import User
from app.repositories.base import UserRepository
from app.schemas.user import ProfileUpdate
from app.schemas.validation import (
    ensure_valid,
    validate_interest,
    validate_profile_update,
)
from app.services.astrology import calculate_chinese_zodiac, calculate_horoscope
from app.services.storage import ImageUpload, LocalImageStorage

logger = logging.getLogger(__name__)


def _unique(items: list[str]) -> list[str]:
    """Drop repeated entries, keeping first-seen order."""
    return list(dict.fromkeys(items))


class ProfileService:
    """Service for reading and mutating user profiles."""

    def __init__(self, users: UserRepository, storage: LocalImageStorage):
        self.users = users
        self.storage = storage

    async def get_profile(self, user_id: str) -> User:
        """
        Get the profile of a user.

        Raises:
            NotFoundError: If the user no longer exists
        """
        return await self.users.find_by_id(user_id)

    async def update_profile(
        self,
        user_id: str,
        request: ProfileUpdate,
        image: Optional[ImageUpload] = None,
    ) -> User:
        """
        Apply a partial update to a profile.

        Only the fields present in the request are written; everything else
        is left as stored. A new birthday re-derives horoscope and Chinese
        zodiac, and an image is written to storage with its path recorded.

        Args:
            user_id: Owner of the profile
            request: Fields to overwrite
            image: Optional uploaded image

        Returns:
            The saved profile

        Raises:
            ValidationFailedError: If a provided field is invalid
            NotFoundError: If the user does not exist
        """
        ensure_valid(validate_profile_update(request))
        user = await self.users.find_by_id(user_id)

        changes = request.changes()

        if "display_name" in changes:
            user.display_name = changes["display_name"]
        if "gender" in changes:
            user.gender = changes["gender"]
        if "birthday" in changes:
            self._apply_birthday(user, changes["birthday"])
        if "height" in changes:
            user.height = changes["height"]
        if "weight" in changes:
            user.weight = changes["weight"]
        if "interests" in changes:
            user.interests = _unique(changes["interests"] or [])

        if image is not None:
            user.image = self.storage.save(user_id, image)

        saved = await self.users.save(user)
        logger.info("Updated profile %s fields=%s image=%s", user_id, sorted(changes), image is not None)
        return saved

    async def add_interest(self, user_id: str, interest: str) -> User:
        """
        Add an interest to a profile.

        Raises:
            ConflictError: If the interest is already present
            NotFoundError: If the user does not exist
        """
        ensure_valid(validate_interest(interest))
        user = await self.users.find_by_id(user_id)

        if interest in user.interests:
            raise ConflictError("Interest already exists for the user")

        user.interests.append(interest)
        saved = await self.users.save(user)
        logger.info("Added interest %r to user %s", interest, user_id)
        return saved

    async def remove_interest(self, user_id: str, interest: str) -> User:
        """
        Remove an interest from a profile.

        Raises:
            NotFoundError: If the interest or the user does not exist
        """
        user = await self.users.find_by_id(user_id)

        if interest not in user.interests:
            raise NotFoundError("Interest not found for the user")

        user.interests = [i for i in user.interests if i != interest]
        saved = await self.users.save(user)
        logger.info("Removed interest %r from user %s", interest, user_id)
        return saved

    @staticmethod
    def _apply_birthday(user: User, birthday) -> None:
        # Derived fields always move together with the birthday
        user.birthday = birthday
        if birthday is None:
            user.horoscope = None
            user.chinese_zodiac = None
        else:
            user.horoscope = calculate_horoscope(birthday)
            user.chinese_zodiac = calculate_chinese_zodiac(birthday)

"""
User profile request/response schemas.
"""
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.user import User


class ProfileResponse(BaseModel):
    """Profile information response (excludes the password hash)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="User email")
    display_name: Optional[str] = Field(None, alias="displayName")
    gender: Optional[str] = Field(None)
    birthday: Optional[date] = Field(None)
    horoscope: Optional[str] = Field(None)
    chinese_zodiac: Optional[str] = Field(None, alias="chineseZodiac")
    height: Optional[float] = Field(None)
    weight: Optional[float] = Field(None)
    interests: list[str] = Field(default_factory=list)
    image: Optional[str] = Field(None)
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @classmethod
    def from_user(cls, user: User) -> "ProfileResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            display_name=user.display_name,
            gender=user.gender,
            birthday=user.birthday,
            horoscope=user.horoscope,
            chinese_zodiac=user.chinese_zodiac,
            height=user.height,
            weight=user.weight,
            interests=list(user.interests),
            image=user.image,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class ProfileUpdate(BaseModel):
    """
    Partial profile update.

    Only fields present in the request body are applied. Derived fields
    (horoscope, chineseZodiac) are not accepted and are ignored if sent.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    display_name: Optional[str] = Field(None, alias="displayName")
    gender: Optional[str] = Field(None, description='"male" or "female"')
    birthday: Optional[date] = Field(None, description="ISO date or timestamp")
    height: Optional[float] = Field(None)
    weight: Optional[float] = Field(None)
    interests: Optional[list[str]] = Field(None, description="Replaces the interest list")

    @field_validator("birthday", mode="before")
    @classmethod
    def birthday_from_timestamp(cls, value):
        """Accept full ISO 8601 timestamps and keep their calendar date."""
        if isinstance(value, str) and "T" in value:
            try:
                return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
            except ValueError:
                return value
        return value

    def changes(self) -> dict:
        """Fields explicitly provided by the caller, keyed by model field name."""
        return self.model_dump(exclude_unset=True)


class InterestRequest(BaseModel):
    """Single interest to add."""
    interest: str = Field(..., description="Interest tag")

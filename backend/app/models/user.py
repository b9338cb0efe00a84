"""
User model for the profile database.

One document holds both the identity (username, email, password hash)
and the mutable profile attributes.
"""
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    """Accepted gender values."""
    MALE = "male"
    FEMALE = "female"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    """
    User document model for MongoDB profile_db.users collection.
    """
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="Unique email address")
    hashed_password: str = Field(..., description="Bcrypt hashed password")

    display_name: Optional[str] = Field(None, description="Name shown to other users")
    gender: Optional[Gender] = Field(None, description="Gender")
    birthday: Optional[date] = Field(None, description="Date of birth")
    horoscope: Optional[str] = Field(None, description="Derived from birthday")
    chinese_zodiac: Optional[str] = Field(None, description="Derived from birthday")
    height: Optional[float] = Field(None, description="Height")
    weight: Optional[float] = Field(None, description="Weight")
    interests: list[str] = Field(default_factory=list, description="Interest tags")
    image: Optional[str] = Field(None, description="Path of the stored profile image")

    created_at: datetime = Field(default_factory=utc_now, description="Account creation timestamp")
    updated_at: datetime = Field(default_factory=utc_now, description="Last write timestamp")

    def to_document(self) -> dict:
        """Serialize for MongoDB (without _id; dates as ISO strings)."""
        doc = self.model_dump(exclude={"id"})
        if doc.get("birthday") is not None:
            doc["birthday"] = doc["birthday"].isoformat()
        return doc

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        """Build a User from a raw MongoDB document."""
        doc = dict(doc)
        if "_id" in doc:
            doc["_id"] = str(doc["_id"])
        return cls(**doc)

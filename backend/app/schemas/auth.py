"""
Authentication request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Registration request body."""
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password (min 6 characters)")
    confirm_password: str = Field(
        ...,
        alias="confirmPassword",
        description="Password confirmation",
    )

    def passwords_match(self) -> bool:
        """Check if password and confirmation match."""
        return self.password == self.confirm_password


class CreateProfileRequest(BaseModel):
    """Body of POST /user/profile: an identity without password confirmation."""
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password (min 6 characters)")


class LoginRequest(BaseModel):
    """Login request body."""
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    token: str = Field(..., description="JWT access token")


class TokenPayload(BaseModel):
    """Decoded JWT token payload."""
    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="User email")
    iat: Optional[int] = Field(None, description="Issued at (epoch seconds)")
    exp: Optional[int] = Field(None, description="Expiration (epoch seconds)")

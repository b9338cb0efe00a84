"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import (
    CreateProfileRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenPayload,
)
from app.schemas.user import InterestRequest, ProfileResponse, ProfileUpdate

__all__ = [
    # Auth
    "CreateProfileRequest",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "TokenPayload",
    # Profile
    "InterestRequest",
    "ProfileResponse",
    "ProfileUpdate",
]

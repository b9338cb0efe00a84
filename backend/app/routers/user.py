"""
User router for registration, login and profile management.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile, status

from app.dependencies.auth import CurrentUser, public_route
from app.dependencies.services import get_auth_service, get_profile_service
from app.schemas.auth import (
    CreateProfileRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from app.schemas.user import InterestRequest, ProfileResponse, ProfileUpdate
from app.services.auth_service import AuthService
from app.services.profile_service import ProfileService
from app.services.storage import ImageUpload

router = APIRouter(prefix="/user", tags=["User"])


# ==================== Public ====================


@router.post(
    "/register",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    dependencies=[Depends(public_route)],
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account.

    - **username**: Unique username
    - **email**: Valid email address (must be unique)
    - **password**: Password (minimum 6 characters)
    - **confirmPassword**: Must match password
    """
    user = await auth_service.register(body)
    return ProfileResponse.from_user(user)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
    dependencies=[Depends(public_route)],
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email and password to receive a JWT token.

    Send the token as `Authorization: Bearer <token>` or in a `jwt` cookie.
    """
    return await auth_service.login(body)


# ==================== Protected ====================


@router.get(
    "/profile",
    response_model=ProfileResponse,
    summary="Get own profile",
)
async def get_profile(
    current_user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """Get the profile of the authenticated user."""
    user = await profile_service.get_profile(current_user.id)
    return ProfileResponse.from_user(user)


@router.post(
    "/profile",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile record",
)
async def create_profile(
    body: CreateProfileRequest,
    current_user: CurrentUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Create an identity from username, email and password.

    Overlaps with `/user/register` but skips the password confirmation and
    returns the created record rather than a token.
    """
    user = await auth_service.create_profile(body)
    return ProfileResponse.from_user(user)


@router.put(
    "/profile",
    response_model=ProfileResponse,
    summary="Update own profile",
)
async def update_profile(
    body: ProfileUpdate,
    current_user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """
    Partially update the authenticated user's profile.

    Only the fields sent are changed. Sending `birthday` recomputes
    `horoscope` and `chineseZodiac`; `interests` replaces the whole list.
    """
    user = await profile_service.update_profile(current_user.id, body)
    return ProfileResponse.from_user(user)


@router.put(
    "/profile/image",
    response_model=ProfileResponse,
    summary="Upload profile image",
)
async def upload_profile_image(
    current_user: CurrentUser,
    image: Annotated[UploadFile, File(description="Profile image")],
    profile_service: ProfileService = Depends(get_profile_service),
):
    """Store an uploaded image and record its path on the profile."""
    upload = ImageUpload(filename=image.filename or "upload", content=await image.read())
    user = await profile_service.update_profile(current_user.id, ProfileUpdate(), image=upload)
    return ProfileResponse.from_user(user)


@router.post(
    "/profile/interests",
    response_model=ProfileResponse,
    summary="Add an interest",
)
async def add_interest(
    body: InterestRequest,
    current_user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """Add an interest; 409 if it is already in the list."""
    user = await profile_service.add_interest(current_user.id, body.interest)
    return ProfileResponse.from_user(user)


@router.delete(
    "/profile/interests/{interest:path}",
    response_model=ProfileResponse,
    summary="Remove an interest",
)
async def remove_interest(
    interest: str,
    current_user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """Remove an interest; 404 if it is not in the list."""
    user = await profile_service.remove_interest(current_user.id, interest)
    return ProfileResponse.from_user(user)

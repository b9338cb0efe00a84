"""
Service layer for business logic.
"""
from app.services.auth_service import AuthService
from app.services.profile_service import ProfileService
from app.services.storage import ImageUpload, LocalImageStorage

__all__ = [
    "AuthService",
    "ProfileService",
    "ImageUpload",
    "LocalImageStorage",
]

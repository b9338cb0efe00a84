"""
Pydantic models for database documents and data structures.
"""
from app.models.user import Gender, User

__all__ = [
    "Gender",
    "User",
]

"""
Persistence adapters.

Services depend on the UserRepository interface; the MongoDB and in-memory
implementations can be swapped without touching business logic.
"""
from app.repositories.base import UserRepository
from app.repositories.memory import InMemoryUserRepository
from app.repositories.mongo import MongoUserRepository

__all__ = [
    "UserRepository",
    "InMemoryUserRepository",
    "MongoUserRepository",
]

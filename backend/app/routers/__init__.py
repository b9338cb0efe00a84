"""
API Routers module.
"""
from app.routers import health, user

__all__ = ["health", "user"]

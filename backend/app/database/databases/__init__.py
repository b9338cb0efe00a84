"""
Database definitions and collection constants.
"""
from app.database.databases import profile_db

__all__ = ["profile_db"]

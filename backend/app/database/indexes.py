"""
Index management.
Ensures the indexes behind the uniqueness invariants exist on startup.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.databases import profile_db

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create necessary indexes for the profile database."""
    for collection_name, indexes in profile_db.INDEXES.items():
        collection = db[collection_name]
        for index in indexes:
            name = await collection.create_index(index["keys"], unique=index.get("unique", False))
            logger.debug("Ensured index %s on %s", name, collection_name)

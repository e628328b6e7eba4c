"""
Taskkeeper API - Database Module

MongoDB connection management using Motor (async driver).
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from taskkeeper.config import settings

logger = logging.getLogger(__name__)

COUNTERS_COLLECTION = "counters"


class Database:
    """MongoDB database connection manager."""

    client: AsyncIOMotorClient | None = None
    db: AsyncIOMotorDatabase | None = None

    async def connect(self) -> None:
        """Connect to MongoDB."""
        self.client = AsyncIOMotorClient(settings.MONGODB_URI)
        self.db = self.client[settings.MONGODB_DATABASE]
        logger.info("Connected to MongoDB database %s", settings.MONGODB_DATABASE)

    async def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Disconnected from MongoDB")

    def get_database(self) -> AsyncIOMotorDatabase:
        """Get the database instance."""
        if self.db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.db


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the indexes the repositories rely on."""
    await db["users"].create_index([("username", ASCENDING)], unique=True)
    await db["tasks"].create_index([("user_id", ASCENDING)])


async def next_sequence(db: AsyncIOMotorDatabase, name: str) -> int:
    """Atomically allocate the next integer id for a collection."""
    counter = await db[COUNTERS_COLLECTION].find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return counter["seq"]


# Singleton database instance
database = Database()


async def get_database() -> AsyncIOMotorDatabase:
    """Dependency to get the database instance."""
    return database.get_database()

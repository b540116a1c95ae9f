"""
Database connection management.
Single Motor client per process, opened and closed by the application lifespan.
"""
from typing import Optional
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.config import settings
from app.db_collections import Collections
from app.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

__all__ = ["Database", "Collections"]


class Database:
    """Holder for the process-wide MongoDB client and database handle."""

    client: Optional[AsyncIOMotorClient] = None
    db: Optional[AsyncIOMotorDatabase] = None

    @classmethod
    def connect(
        cls,
        mongo_url: Optional[str] = None,
        db_name: Optional[str] = None
    ) -> AsyncIOMotorDatabase:
        """
        Open the MongoDB client.

        Args:
            mongo_url: Connection string (defaults to settings.MONGO_URL)
            db_name: Database name (defaults to settings.DB_NAME)

        Returns:
            Database handle
        """
        mongo_url = mongo_url or settings.MONGO_URL
        db_name = db_name or settings.DB_NAME

        cls.client = AsyncIOMotorClient(
            mongo_url,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS
        )
        cls.db = cls.client[db_name]
        logger.info(f"Connected to MongoDB database '{db_name}'")
        return cls.db

    @classmethod
    def use(cls, db) -> None:
        """Install an already built database handle (used by tests and scripts)."""
        cls.db = db

    @classmethod
    def get_db(cls) -> AsyncIOMotorDatabase:
        """Return the active database handle."""
        if cls.db is None:
            raise ConfigurationError("Database not initialized: call Database.connect() first")
        return cls.db

    @classmethod
    async def ping(cls) -> bool:
        """Check that the server answers."""
        if cls.client is None:
            return cls.db is not None
        try:
            await cls.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    @classmethod
    def close(cls) -> None:
        """Close the client and forget the handle."""
        if cls.client is not None:
            cls.client.close()
            logger.info("MongoDB connection closed")
        cls.client = None
        cls.db = None

# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_client() -> AsyncIOMotorClient:
    """
    Get MongoDB client instance (singleton pattern)

    The client connects lazily; the first command opens the pool.

    Returns:
        MongoDB client instance
    """
    global _mongo_client

    if _mongo_client is not None:
        return _mongo_client

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=5000,
        retryWrites=True,
        retryReads=True,
    )
    return _mongo_client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_database = get_client()[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[get_settings().mongo_user_collection]


async def check_database_health() -> bool:
    """
    Ping the database

    Returns:
        True if the server answered, False otherwise
    """
    try:
        await get_client().admin.command("ping")
        return True
    except PyMongoError as e:
        logger.error(f"Database health check failed: {e}")
        return False


def close_mongo_connection() -> None:
    """Close the MongoDB client and forget the cached handles"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        logger.info("Closing MongoDB connection")
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None

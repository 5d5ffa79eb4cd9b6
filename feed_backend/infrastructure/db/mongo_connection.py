# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import PostFields, UserFields

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_post_collection() -> AsyncIOMotorCollection:
    """
    Get posts collection from MongoDB

    Returns:
        MongoDB collection for posts
    """
    return get_database()["posts"]


async def ensure_indexes() -> None:
    """Create the unique email index and the feed ordering index"""
    await get_user_collection().create_index(
        [(UserFields.EMAIL, ASCENDING)], unique=True, name="uniq_email"
    )
    await get_post_collection().create_index(
        [(PostFields.CREATED_AT, DESCENDING)], name="created_at_desc"
    )
    logger.info("MongoDB indexes ensured")


def close_database() -> None:
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None

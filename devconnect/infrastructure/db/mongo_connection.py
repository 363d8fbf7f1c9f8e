# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields, ProfileFields, PostFields

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_client() -> AsyncIOMotorClient:
    """
    Get MongoDB client instance (singleton pattern)

    Returns:
        Motor client shared by every collection and session
    """
    global _mongo_client

    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
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
    return get_database()["users"]


def get_profile_collection() -> AsyncIOMotorCollection:
    """
    Get profiles collection from MongoDB

    Returns:
        MongoDB collection for profiles
    """
    return get_database()["profiles"]


def get_post_collection() -> AsyncIOMotorCollection:
    """
    Get posts collection from MongoDB

    Returns:
        MongoDB collection for posts
    """
    return get_database()["posts"]


async def ensure_indexes() -> None:
    """
    Create the indexes the repositories rely on.

    The unique index on profiles.user_id is what guarantees at most one
    profile per user when two first-time upserts race.
    """
    await get_user_collection().create_index(
        [(UserFields.EMAIL, ASCENDING)], unique=True, name="uniq_email"
    )
    await get_profile_collection().create_index(
        [(ProfileFields.USER_ID, ASCENDING)], unique=True, name="uniq_user_id"
    )
    await get_post_collection().create_index(
        [(PostFields.USER_ID, ASCENDING)], name="post_user_id"
    )
    await get_post_collection().create_index(
        [(PostFields.CREATED_AT, DESCENDING)], name="post_created_at"
    )
    logger.info("MongoDB indexes ensured")


async def ping_database() -> bool:
    """
    Check that MongoDB answers a ping

    Returns:
        True when the server responded, False otherwise
    """
    try:
        await get_database().command("ping")
        return True
    except PyMongoError as e:
        logger.warning(f"MongoDB ping failed: {e}")
        return False


def close_client() -> None:
    """Close the shared client, if one was opened."""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None

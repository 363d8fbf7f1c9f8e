from .mongo_connection import (
    get_client,
    get_database,
    get_user_collection,
    get_profile_collection,
    get_post_collection,
    ensure_indexes,
    ping_database,
    close_client,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_profile_repository import MongoProfileRepository
from .mongo_post_repository import MongoPostRepository
from .mongo_transaction_runner import MongoTransactionRunner

__all__ = [
    "get_client",
    "get_database",
    "get_user_collection",
    "get_profile_collection",
    "get_post_collection",
    "ensure_indexes",
    "ping_database",
    "close_client",
    "MongoUserRepository",
    "MongoProfileRepository",
    "MongoPostRepository",
    "MongoTransactionRunner",
]

from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.transaction_runner import TransactionRunner
from ...infrastructure.db.mongo_connection import (
    get_client,
    get_database,
    get_user_collection,
    get_profile_collection,
    get_post_collection,
)
from ...infrastructure.db.mongo_transaction_runner import MongoTransactionRunner

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the client, database, collections and transaction runner.
        This is the ONLY place where database connections are registered.
        """
        settings = get_settings()
        
        container.register_singleton("mongo_client", get_client())
        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("profile_collection", get_profile_collection())
        container.register_singleton("post_collection", get_post_collection())
        
        container.register_singleton(
            TransactionRunner,
            MongoTransactionRunner(
                client=container.get("mongo_client"),
                enabled=settings.mongo_use_transactions,
            )
        )

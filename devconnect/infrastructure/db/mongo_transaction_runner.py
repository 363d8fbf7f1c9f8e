# Standard library imports
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

# Local application imports
from ...core.errors import StorageFailure
from ...domain.repositories.transaction_runner import TransactionRunner

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MongoTransactionRunner(TransactionRunner):
    """
    Runs operations inside a MongoDB multi-document transaction.

    Transactions require a replica set; with ``enabled=False`` the operation
    receives ``session=None`` and callers fall back to ordered, non-atomic steps.
    """

    def __init__(self, client: AsyncIOMotorClient, enabled: bool = False) -> None:
        self.client = client
        self.enabled = enabled

    @property
    def is_atomic(self) -> bool:
        return self.enabled

    async def run(self, operation: Callable[[Optional[Any]], Awaitable[T]]) -> T:
        if not self.enabled:
            return await operation(None)

        try:
            async with await self.client.start_session() as session:
                # Leaving the block with an exception aborts the transaction
                async with session.start_transaction():
                    return await operation(session)
        except PyMongoError as e:
            logger.error(f"Transaction aborted: {e}", exc_info=True)
            raise StorageFailure(f"Transaction aborted: {str(e)}") from e

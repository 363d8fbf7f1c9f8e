"""
Optimistic-concurrency writes for aggregates stored as single documents.

Every aggregate document has an integer ``version``. A write replaces the
document only if the stored version still equals the version that was read,
and bumps it by one. A lost race shows up as zero matched documents, which is
reported as ConcurrentModification so the use case can reload and retry.
"""
# Standard library imports
import logging
from typing import Any, Dict

# External package imports
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.errors import ConcurrentModification, NotFound, StorageFailure

logger = logging.getLogger(__name__)

VERSION_FIELD = "version"
MONGO_ID = "_id"


async def insert_versioned(
    collection: AsyncIOMotorCollection,
    document: Dict[str, Any],
    entity: str,
) -> Dict[str, Any]:
    """
    Insert a new aggregate document at version 1.

    A unique-index violation means a concurrent writer created the same
    aggregate first; it is reported as ConcurrentModification.
    """
    new_document = {**document, VERSION_FIELD: 1}
    new_document.pop(MONGO_ID, None)
    try:
        result = await collection.insert_one(new_document)
    except DuplicateKeyError as e:
        logger.info(f"Concurrent creation of {entity} detected: {e}")
        raise ConcurrentModification(f"{entity} was created concurrently") from e
    except PyMongoError as e:
        logger.error(f"Error inserting {entity}: {e}", exc_info=True)
        raise StorageFailure(f"Error inserting {entity}: {str(e)}") from e

    new_document[MONGO_ID] = result.inserted_id
    return new_document


async def upsert_versioned(
    collection: AsyncIOMotorCollection,
    key_filter: Dict[str, Any],
    document: Dict[str, Any],
    entity: str,
) -> Dict[str, Any]:
    """
    Create the aggregate identified by ``key_filter`` at version 1, unless one exists.

    The insert is a ``$setOnInsert`` upsert on the natural key, so an existing
    aggregate is never duplicated; finding one is reported as
    ConcurrentModification and the caller retries as an update.
    """
    new_document = {**document, VERSION_FIELD: 1}
    new_document.pop(MONGO_ID, None)
    on_insert = {k: v for k, v in new_document.items() if k not in key_filter}
    try:
        result = await collection.update_one(
            key_filter, {"$setOnInsert": on_insert}, upsert=True
        )
    except DuplicateKeyError as e:
        logger.info(f"Concurrent creation of {entity} detected: {e}")
        raise ConcurrentModification(f"{entity} was created concurrently") from e
    except PyMongoError as e:
        logger.error(f"Error creating {entity}: {e}", exc_info=True)
        raise StorageFailure(f"Error creating {entity}: {str(e)}") from e

    if result.upserted_id is None:
        logger.info(f"{entity} matching {key_filter} already exists")
        raise ConcurrentModification(f"{entity} was created concurrently")

    new_document[MONGO_ID] = result.upserted_id
    return new_document


async def replace_versioned(
    collection: AsyncIOMotorCollection,
    object_id: ObjectId,
    expected_version: int,
    document: Dict[str, Any],
    entity: str,
) -> Dict[str, Any]:
    """
    Replace an aggregate document if its stored version is ``expected_version``.

    Returns:
        The stored document after the write

    Raises:
        NotFound: the document no longer exists
        ConcurrentModification: the document exists at another version
    """
    replacement = {k: v for k, v in document.items() if k != MONGO_ID}
    replacement[VERSION_FIELD] = expected_version + 1

    # Documents written before versioning was introduced have no version field
    if expected_version == 0:
        version_filter: Dict[str, Any] = {
            "$or": [{VERSION_FIELD: 0}, {VERSION_FIELD: {"$exists": False}}]
        }
    else:
        version_filter = {VERSION_FIELD: expected_version}

    try:
        updated = await collection.find_one_and_replace(
            {MONGO_ID: object_id, **version_filter},
            replacement,
            return_document=ReturnDocument.AFTER,
        )
        if updated is not None:
            return updated

        exists = await collection.count_documents({MONGO_ID: object_id}, limit=1)
    except PyMongoError as e:
        logger.error(f"Error saving {entity} {object_id}: {e}", exc_info=True)
        raise StorageFailure(f"Error saving {entity}: {str(e)}") from e

    if not exists:
        raise NotFound(f"{entity} not found")
    logger.info(f"Version conflict on {entity} {object_id} (expected version {expected_version})")
    raise ConcurrentModification(f"{entity} was modified concurrently")

# Standard library imports
import logging
from typing import Any, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.errors import AlreadyRegistered, NotFound, StorageFailure
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def to_object_id(value: str) -> Optional[ObjectId]:
    """Parse a string ID, returning None when it is not a valid ObjectId."""
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email.lower()})
        except PyMongoError as e:
            logger.error(f"Error finding user by email: {e}", exc_info=True)
            raise StorageFailure(f"Error finding user by email: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        object_id = to_object_id(user_id) if user_id else None
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding user by ID {user_id}: {e}", exc_info=True)
            raise StorageFailure(f"Error finding user by ID: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_ids(self, user_ids: List[str]) -> List[User]:
        object_ids = [oid for oid in (to_object_id(uid) for uid in user_ids) if oid is not None]
        if not object_ids:
            return []

        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            logger.error(f"Error finding users by IDs: {e}", exc_info=True)
            raise StorageFailure(f"Error finding users by IDs: {str(e)}") from e

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            AlreadyRegistered: If another user already has this email
            NotFound: If updating a user that no longer exists
        """
        user_dict = self._user_to_dict(user)

        try:
            if user.id:
                object_id = to_object_id(user.id)
                if object_id is None:
                    raise NotFound(f"Invalid user ID format: {user.id}")
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise NotFound(f"User with ID {user.id} not found")

                updated_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
                if updated_document is None:
                    raise NotFound(f"User {user.id} was updated but could not be retrieved")
                return self._document_to_user(updated_document)

            result = await self.user_collection.insert_one(user_dict)
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise StorageFailure("User was created but could not be retrieved")
            return self._document_to_user(new_document)
        except DuplicateKeyError as e:
            raise AlreadyRegistered() from e
        except PyMongoError as e:
            logger.error(f"Error saving user: {e}", exc_info=True)
            raise StorageFailure(f"Error saving user: {str(e)}") from e

    async def delete(self, user_id: str, session: Optional[Any] = None) -> bool:
        object_id = to_object_id(user_id)
        if object_id is None:
            return False

        try:
            result = await self.user_collection.delete_one(
                {UserFields.MONGO_ID: object_id}, session=session
            )
        except PyMongoError as e:
            logger.error(f"Error deleting user {user_id}: {e}", exc_info=True)
            raise StorageFailure(f"Error deleting user: {str(e)}") from e
        return result.deleted_count > 0

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise StorageFailure("Invalid user document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            avatar_url=document.get(UserFields.AVATAR_URL) or "",
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)
        """
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email.lower(),
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.AVATAR_URL: user.avatar_url,
        }

# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.errors import NotFound, StorageFailure
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post, Like, Comment
from ...domain.constants import PostFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_post_collection
from .mongo_user_repository import to_object_id
from .versioned_write import insert_versioned, replace_versioned

logger = logging.getLogger(__name__)


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """
        Find post by ID

        Args:
            post_id: The post ID to find

        Returns:
            Post domain model if found, None otherwise (including malformed IDs)
        """
        object_id = to_object_id(post_id) if post_id else None
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding post {post_id}: {e}", exc_info=True)
            raise StorageFailure(f"Error finding post by ID: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_post(document)

    async def list_newest_first(self) -> List[Post]:
        try:
            cursor = self.post_collection.find({}).sort(PostFields.CREATED_AT, DESCENDING)
            posts = []
            async for document in cursor:
                posts.append(self._document_to_post(document))
            return posts
        except PyMongoError as e:
            logger.error(f"Error listing posts: {e}", exc_info=True)
            raise StorageFailure(f"Error listing posts: {str(e)}") from e

    async def save(self, post: Post) -> Post:
        """
        Save post (create new or versioned replace of an existing one)

        Args:
            post: Post domain model to save

        Returns:
            Saved Post domain model with ID and new version set
        """
        document = self._post_to_dict(post)

        if post.id is None:
            stored = await insert_versioned(self.post_collection, document, "Post")
            return self._document_to_post(stored)

        object_id = to_object_id(post.id)
        if object_id is None:
            raise NotFound("Post not found")
        stored = await replace_versioned(
            self.post_collection, object_id, post.version, document, "Post"
        )
        return self._document_to_post(stored)

    async def delete(self, post_id: str) -> bool:
        object_id = to_object_id(post_id)
        if object_id is None:
            return False

        try:
            result = await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error deleting post {post_id}: {e}", exc_info=True)
            raise StorageFailure(f"Error deleting post: {str(e)}") from e
        return result.deleted_count > 0

    async def delete_by_user(self, user_id: str, session: Optional[Any] = None) -> int:
        try:
            result = await self.post_collection.delete_many(
                {PostFields.USER_ID: user_id}, session=session
            )
        except PyMongoError as e:
            logger.error(f"Error deleting posts for user {user_id}: {e}", exc_info=True)
            raise StorageFailure(f"Error deleting posts: {str(e)}") from e
        return result.deleted_count

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        """
        Convert MongoDB document to Post domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Post domain model
        """
        if not document or PostFields.MONGO_ID not in document:
            raise StorageFailure("Invalid post document: missing _id field")

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            user_id=document.get(PostFields.USER_ID, ""),
            text=document.get(PostFields.TEXT, ""),
            name=document.get(PostFields.NAME) or "",
            avatar=document.get(PostFields.AVATAR) or "",
            likes=[
                Like(user_id=like[PostFields.USER_ID])
                for like in document.get(PostFields.LIKES) or []
            ],
            comments=[
                Comment(
                    id=comment[PostFields.ID],
                    user_id=comment.get(PostFields.USER_ID, ""),
                    text=comment.get(PostFields.TEXT, ""),
                    name=comment.get(PostFields.NAME) or "",
                    avatar=comment.get(PostFields.AVATAR) or "",
                    created_at=ensure_utc(comment.get(PostFields.CREATED_AT)),
                )
                for comment in document.get(PostFields.COMMENTS) or []
            ],
            created_at=ensure_utc(document.get(PostFields.CREATED_AT)),
            version=int(document.get(PostFields.VERSION, 0)),
        )

    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        """
        Convert Post domain model to MongoDB document

        Likes and comments are written in their in-memory order (newest first).
        """
        return {
            PostFields.USER_ID: post.user_id,
            PostFields.TEXT: post.text,
            PostFields.NAME: post.name,
            PostFields.AVATAR: post.avatar,
            PostFields.LIKES: [{PostFields.USER_ID: like.user_id} for like in post.likes],
            PostFields.COMMENTS: [
                {
                    PostFields.ID: comment.id,
                    PostFields.USER_ID: comment.user_id,
                    PostFields.NAME: comment.name,
                    PostFields.AVATAR: comment.avatar,
                    PostFields.TEXT: comment.text,
                    PostFields.CREATED_AT: comment.created_at,
                }
                for comment in post.comments
            ],
            PostFields.CREATED_AT: post.created_at,
        }

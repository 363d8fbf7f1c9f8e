# Standard library imports
import logging

# Local application imports
from ....core.errors import Forbidden, NotFound
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import MessageResponse

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting one of the caller's own posts"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, user_id: str, post_id: str) -> MessageResponse:
        """
        Delete a post owned by the caller
        
        Raises:
            NotFound: If the post does not exist
            Forbidden: If the caller is not the post's author
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFound("Post not found")
        
        try:
            post.ensure_owned_by(user_id)
        except Forbidden:
            logger.warning(f"User {user_id} tried to delete post {post_id} owned by {post.user_id}")
            raise
        
        if not await self.post_repository.delete(post_id):
            raise NotFound("Post not found")
        logger.info(f"User {user_id} deleted post {post_id}")
        return MessageResponse(msg="Post removed")

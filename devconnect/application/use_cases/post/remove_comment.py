# Standard library imports
import logging
from typing import List

# Local application imports
from ....core.errors import NotFound
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Post
from ...dto.post_dto import CommentResponse
from ..concurrency import run_with_retries, DEFAULT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


class RemoveCommentUseCase:
    """Use case for deleting one of the caller's own comments"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.post_repository = post_repository
        self.max_attempts = max_attempts
    
    async def execute(self, user_id: str, post_id: str, comment_id: str) -> List[CommentResponse]:
        """
        Remove the comment whose ID is ``comment_id``
        
        The comment is located by its own ID, so other comments by the same
        user on the post are never touched.
        
        Raises:
            NotFound: If the post or the comment does not exist
            Forbidden: If the comment was written by another user
        """
        async def attempt() -> Post:
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                raise NotFound("Post not found")
            post.remove_comment(comment_id, user_id)
            return await self.post_repository.save(post)
        
        saved_post = await run_with_retries(attempt, self.max_attempts)
        logger.info(f"User {user_id} removed comment {comment_id} from post {post_id}")
        return [CommentResponse.from_domain(c) for c in saved_post.comments]

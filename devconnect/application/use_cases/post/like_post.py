# Standard library imports
from typing import List

# Local application imports
from ....core.errors import NotFound
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Post
from ...dto.post_dto import LikeResponse
from ..concurrency import run_with_retries, DEFAULT_MAX_ATTEMPTS


class LikePostUseCase:
    """Use case for liking a post (at most one like per user)"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.post_repository = post_repository
        self.max_attempts = max_attempts
    
    async def execute(self, user_id: str, post_id: str) -> List[LikeResponse]:
        """
        Prepend a like by ``user_id``
        
        Returns:
            The full like list after the write, newest first
            
        Raises:
            NotFound: If the post does not exist
            AlreadyLiked: If the caller already likes this post
        """
        async def attempt() -> Post:
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                raise NotFound("Post not found")
            post.like(user_id)
            return await self.post_repository.save(post)
        
        saved_post = await run_with_retries(attempt, self.max_attempts)
        return [LikeResponse.from_domain(like) for like in saved_post.likes]

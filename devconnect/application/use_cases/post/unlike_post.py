# Standard library imports
from typing import List

# Local application imports
from ....core.errors import NotFound
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Post
from ...dto.post_dto import LikeResponse
from ..concurrency import run_with_retries, DEFAULT_MAX_ATTEMPTS


class UnlikePostUseCase:
    """Use case for withdrawing the caller's like from a post"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.post_repository = post_repository
        self.max_attempts = max_attempts
    
    async def execute(self, user_id: str, post_id: str) -> List[LikeResponse]:
        """
        Remove the like by ``user_id``
        
        Raises:
            NotFound: If the post does not exist
            NotLiked: If the caller has not liked this post
        """
        async def attempt() -> Post:
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                raise NotFound("Post not found")
            post.unlike(user_id)
            return await self.post_repository.save(post)
        
        saved_post = await run_with_retries(attempt, self.max_attempts)
        return [LikeResponse.from_domain(like) for like in saved_post.likes]

# Standard library imports
from typing import List

# Local application imports
from ....core.errors import NotFound
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.post import Post, Comment
from ....utils.datetime_utils import utc_now
from ...dto.post_dto import CommentCreateRequest, CommentResponse
from ..concurrency import run_with_retries, DEFAULT_MAX_ATTEMPTS
from ..identifiers import generate_entry_id


class AddCommentUseCase:
    """Use case for commenting on a post"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.max_attempts = max_attempts
    
    async def execute(
        self,
        user_id: str,
        post_id: str,
        request: CommentCreateRequest,
    ) -> List[CommentResponse]:
        """
        Prepend a comment snapshotting the commenter's name and avatar
        
        Returns:
            The full comment list after the write, newest first
            
        Raises:
            NotFound: If the post (or the commenter's user record) does not exist
        """
        author = await self.user_repository.find_by_id(user_id)
        if author is None:
            raise NotFound("User not found")
        
        comment = Comment(
            id=generate_entry_id(),
            user_id=user_id,
            text=request.text,
            name=author.name,
            avatar=author.avatar_url,
            created_at=utc_now(),
        )
        
        async def attempt() -> Post:
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                raise NotFound("Post not found")
            post.add_comment(comment)
            return await self.post_repository.save(post)
        
        saved_post = await run_with_retries(attempt, self.max_attempts)
        return [CommentResponse.from_domain(c) for c in saved_post.comments]

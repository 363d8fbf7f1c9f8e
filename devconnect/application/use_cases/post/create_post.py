# Standard library imports
import logging

# Local application imports
from ....core.errors import NotFound
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.post import Post
from ....utils.datetime_utils import utc_now
from ...dto.post_dto import PostCreateRequest, PostResponse

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for publishing a new post"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: PostCreateRequest) -> PostResponse:
        """
        Create a post authored by ``user_id``
        
        The author's current name and avatar are copied into the post and
        are not updated if the user changes them later.
        
        Raises:
            NotFound: If the author's user record does not exist
        """
        author = await self.user_repository.find_by_id(user_id)
        if author is None:
            raise NotFound("User not found")
        
        post = Post(
            id=None,  # Will be set by repository
            user_id=user_id,
            text=request.text,
            name=author.name,
            avatar=author.avatar_url,
            created_at=utc_now(),
        )
        saved_post = await self.post_repository.save(post)
        logger.info(f"User {user_id} created post {saved_post.id}")
        return PostResponse.from_domain(saved_post)

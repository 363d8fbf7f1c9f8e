# Local application imports
from ....core.errors import NotFound
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse


class GetPostUseCase:
    """Use case for getting a post by ID"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, post_id: str) -> PostResponse:
        """
        Get a post by ID
        
        Raises:
            NotFound: If no post has this ID (malformed IDs included)
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFound("Post not found")
        return PostResponse.from_domain(post)

# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse


class ListPostsUseCase:
    """Use case for listing all posts, newest first"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self) -> List[PostResponse]:
        posts = await self.post_repository.list_newest_first()
        return [PostResponse.from_domain(post) for post in posts]

# Local application imports
from ....core.errors import NotFound
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for reading the authenticated user's own account"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> UserResponse:
        """
        Get the caller's user record (never the password hash)
        
        Raises:
            NotFound: If the user disappeared after the token was resolved
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        
        return UserResponse(
            id=user.id or "",
            name=user.name,
            email=user.email,
            avatar_url=user.avatar_url,
        )

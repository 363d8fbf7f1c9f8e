# Local application imports
from ....core.errors import NotFound
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.profile_dto import ProfileResponse


class GetProfileUseCase:
    """Use case for reading one user's profile, populated with the owner's name and avatar"""
    
    def __init__(
        self,
        profile_repository: ProfileRepository,
        user_repository: UserRepository,
    ) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> ProfileResponse:
        """
        Get the profile owned by ``user_id``
        
        Serves both the caller's own profile and the public lookup by user ID.
        
        Raises:
            NotFound: If the user has no profile
        """
        profile = await self.profile_repository.find_by_user(user_id)
        if profile is None:
            raise NotFound("There is no profile for this user")
        
        owner = await self.user_repository.find_by_id(user_id)
        return ProfileResponse.from_domain(profile, owner)

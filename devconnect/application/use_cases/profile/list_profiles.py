# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.profile_dto import ProfileResponse


class ListProfilesUseCase:
    """Use case for the public listing of every profile"""
    
    def __init__(
        self,
        profile_repository: ProfileRepository,
        user_repository: UserRepository,
    ) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self) -> List[ProfileResponse]:
        profiles = await self.profile_repository.list_all()
        if not profiles:
            return []
        
        owner_ids = list(dict.fromkeys(profile.user_id for profile in profiles))
        owners = {user.id: user for user in await self.user_repository.find_by_ids(owner_ids)}
        
        return [
            ProfileResponse.from_domain(profile, owners.get(profile.user_id))
            for profile in profiles
        ]

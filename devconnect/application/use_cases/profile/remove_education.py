# Standard library imports
import logging

# Local application imports
from ....core.errors import NotFound
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.models.profile import Profile
from ...dto.profile_dto import ProfileResponse
from ..concurrency import run_with_retries, DEFAULT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


class RemoveEducationUseCase:
    """Use case for removing an education entry from the caller's profile"""
    
    def __init__(
        self,
        profile_repository: ProfileRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.profile_repository = profile_repository
        self.max_attempts = max_attempts
    
    async def execute(self, user_id: str, education_id: str) -> ProfileResponse:
        """
        Remove the education entry whose ID is ``education_id``
        
        Unknown IDs leave the profile untouched, same as experience removal.
        """
        async def attempt() -> Profile:
            profile = await self.profile_repository.find_by_user(user_id)
            if profile is None:
                raise NotFound("There is no profile for this user")
            
            if not profile.remove_education(education_id):
                logger.info(
                    f"Education {education_id} not on profile of user {user_id}; nothing removed"
                )
                return profile
            return await self.profile_repository.save(profile)
        
        profile = await run_with_retries(attempt, self.max_attempts)
        return ProfileResponse.from_domain(profile)

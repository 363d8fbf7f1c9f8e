# Standard library imports
import logging

# Local application imports
from ....core.errors import NotFound
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.models.profile import Profile
from ...dto.profile_dto import ProfileResponse
from ..concurrency import run_with_retries, DEFAULT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


class RemoveExperienceUseCase:
    """Use case for removing an experience entry from the caller's profile"""
    
    def __init__(
        self,
        profile_repository: ProfileRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.profile_repository = profile_repository
        self.max_attempts = max_attempts
    
    async def execute(self, user_id: str, experience_id: str) -> ProfileResponse:
        """
        Remove the experience entry whose ID is ``experience_id``
        
        An unknown ID is an idempotent no-op: nothing is written and the
        current profile is returned unchanged.
        
        Raises:
            NotFound: If the caller has no profile
        """
        async def attempt() -> Profile:
            profile = await self.profile_repository.find_by_user(user_id)
            if profile is None:
                raise NotFound("There is no profile for this user")
            
            if not profile.remove_experience(experience_id):
                logger.info(
                    f"Experience {experience_id} not on profile of user {user_id}; nothing removed"
                )
                return profile
            return await self.profile_repository.save(profile)
        
        profile = await run_with_retries(attempt, self.max_attempts)
        return ProfileResponse.from_domain(profile)

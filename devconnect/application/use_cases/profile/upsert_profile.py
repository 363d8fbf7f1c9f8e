# Standard library imports
import logging

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.models.profile import Profile
from ....utils.datetime_utils import utc_now
from ...dto.profile_dto import ProfileUpsertRequest, ProfileResponse
from ..concurrency import run_with_retries, DEFAULT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


class UpsertProfileUseCase:
    """Use case for creating the caller's profile or partially updating it"""
    
    def __init__(
        self,
        profile_repository: ProfileRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.profile_repository = profile_repository
        self.max_attempts = max_attempts
    
    async def execute(self, user_id: str, request: ProfileUpsertRequest) -> ProfileResponse:
        """
        Create or update the profile owned by ``user_id``
        
        Only fields present in the request are written on update; omitted
        fields keep their stored values.
        
        Args:
            user_id: Caller's user ID
            request: Validated profile fields
            
        Returns:
            ProfileResponse with the persisted profile
        """
        fields = request.model_dump(exclude_unset=True, exclude_none=True)
        
        async def attempt() -> Profile:
            profile = await self.profile_repository.find_by_user(user_id)
            if profile is None:
                profile = Profile.create(user_id, fields, created_at=utc_now())
                logger.info(f"Creating profile for user {user_id}")
            else:
                profile.apply_update(fields)
            return await self.profile_repository.save(profile)
        
        saved_profile = await run_with_retries(attempt, self.max_attempts)
        return ProfileResponse.from_domain(saved_profile)

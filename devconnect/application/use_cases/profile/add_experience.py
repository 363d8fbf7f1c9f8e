# Local application imports
from ....core.errors import NotFound
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.models.profile import Profile, Experience
from ...dto.profile_dto import ExperienceCreateRequest, ProfileResponse
from ..concurrency import run_with_retries, DEFAULT_MAX_ATTEMPTS
from ..identifiers import generate_entry_id


class AddExperienceUseCase:
    """Use case for prepending an experience entry to the caller's profile"""
    
    def __init__(
        self,
        profile_repository: ProfileRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.profile_repository = profile_repository
        self.max_attempts = max_attempts
    
    async def execute(self, user_id: str, request: ExperienceCreateRequest) -> ProfileResponse:
        """
        Add an experience entry (newest first) with a freshly generated ID
        
        Args:
            user_id: Caller's user ID
            request: Validated experience fields
            
        Returns:
            ProfileResponse with the updated profile
            
        Raises:
            NotFound: If the caller has no profile yet
        """
        async def attempt() -> Profile:
            profile = await self.profile_repository.find_by_user(user_id)
            if profile is None:
                raise NotFound("There is no profile for this user")
            
            profile.add_experience(
                Experience(
                    id=generate_entry_id(),
                    title=request.title,
                    company=request.company,
                    location=request.location,
                    from_date=request.from_date,
                    to_date=request.to_date,
                    current=request.current,
                    description=request.description,
                )
            )
            return await self.profile_repository.save(profile)
        
        saved_profile = await run_with_retries(attempt, self.max_attempts)
        return ProfileResponse.from_domain(saved_profile)

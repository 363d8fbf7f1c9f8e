# Standard library imports
import logging

# Local application imports
from ....core.errors import AlreadyRegistered
from ....core.security import hash_password, create_jwt_token
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ...dto.auth_dto import UserRegistrationRequest, TokenResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserRegistrationRequest) -> TokenResponse:
        """
        Register a new user and sign them in
        
        Args:
            request: Registration request with user details
            
        Returns:
            TokenResponse with an access token for the new user
            
        Raises:
            AlreadyRegistered: If user with email already exists
        """
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise AlreadyRegistered()
        
        new_user = User(
            id=None,  # Will be set by repository
            name=request.name,
            email=request.email.lower(),
            hashed_password=hash_password(request.password),
            avatar_url=request.avatar_url or "",
        )
        
        # The unique email index still guards a concurrent registration
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")
        
        token = create_jwt_token({
            "sub": saved_user.id or "",  # JWT standard claim (subject)
            UserFields.EMAIL: saved_user.email,
        })
        return TokenResponse(access_token=token)

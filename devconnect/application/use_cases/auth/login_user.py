# Local application imports
from ....core.errors import Unauthorized
from ....core.security import verify_password, create_jwt_token
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ...dto.auth_dto import UserLoginRequest, TokenResponse


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserLoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token
        
        Args:
            request: Login request with email and password
            
        Returns:
            TokenResponse if authentication successful
            
        Raises:
            Unauthorized: If the email is unknown or the password does not match
        """
        user = await self.user_repository.find_by_email(request.email.lower())
        if user is None or not verify_password(request.password, user.hashed_password):
            raise Unauthorized("Invalid credentials")
        
        token = create_jwt_token({
            "sub": user.id or "",  # JWT standard claim (subject)
            UserFields.EMAIL: user.email,
        })
        return TokenResponse(access_token=token)

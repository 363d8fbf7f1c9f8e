# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.errors import Unauthorized
from ....core.security import decode_jwt_token
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.caller import CallerIdentity

logger = logging.getLogger(__name__)


class ResolveCallerUseCase:
    """Resolves the acting principal from a bearer credential"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, token: Optional[str]) -> CallerIdentity:
        """
        Verify a token and return the caller it is bound to
        
        Args:
            token: JWT access token (may be None when no credential was sent)
            
        Returns:
            CallerIdentity of the token's subject
            
        Raises:
            Unauthorized: If the token is missing, malformed, expired, fails
                signature verification, or names a user that no longer exists
        """
        if not token:
            raise Unauthorized("No token, authorization denied")
        
        try:
            payload = decode_jwt_token(token)
        except ValueError as exception:
            logger.info(f"Rejected credential: {exception}")
            raise Unauthorized("Token is not valid")
        
        user_id = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            raise Unauthorized("Invalid authentication payload: missing user ID")
        
        # Deleted accounts keep their unexpired tokens; refuse them here
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise Unauthorized("User no longer exists")
        
        return CallerIdentity(user_id=user_id)

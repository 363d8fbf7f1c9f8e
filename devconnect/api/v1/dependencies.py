# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.resolve_caller import ResolveCallerUseCase
from ...domain.models.caller import CallerIdentity
from ...di.container import get_container


# auto_error is off so a missing header surfaces as our own 401 envelope
security_scheme = HTTPBearer(auto_error=False)


async def get_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    x_auth_token: Optional[str] = Header(default=None),
) -> CallerIdentity:
    """
    FastAPI dependency resolving the authenticated caller
    
    Accepts ``Authorization: Bearer <token>`` and, for older clients, the
    ``x-auth-token`` header. Bearer wins when both are sent.
    
    Args:
        credentials: HTTP Bearer token credentials, if any
        x_auth_token: Raw token from the ``x-auth-token`` header, if any
        
    Returns:
        CallerIdentity of the token's subject
        
    Raises:
        Unauthorized: Rendered as 401 by the global error handler
    """
    token = credentials.credentials if credentials is not None else x_auth_token
    
    container = get_container()
    resolve_caller_use_case = container.get(ResolveCallerUseCase)
    return await resolve_caller_use_case.execute(token)

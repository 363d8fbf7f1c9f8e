# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...domain.models.caller import CallerIdentity
from ...di.container import get_container
from .dependencies import get_caller


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> TokenResponse:
    """
    Register a new user and sign them in
    
    Args:
        request: User registration request
        
    Returns:
        TokenResponse with an access token for the new account
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)


@router.post("/login", response_model=TokenResponse)
async def login_user(request: UserLoginRequest) -> TokenResponse:
    """
    Authenticate user and get access token
    
    Args:
        request: User login request
        
    Returns:
        TokenResponse with access token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    return await login_use_case.execute(request)


@router.get("/me", response_model=UserResponse)
async def get_me(caller: CallerIdentity = Depends(get_caller)) -> UserResponse:
    """Get current authenticated user information"""
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(caller.user_id)

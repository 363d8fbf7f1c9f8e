# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.profile_dto import (
    ProfileUpsertRequest,
    ProfileResponse,
    ExperienceCreateRequest,
    EducationCreateRequest,
    DeleteAccountResponse,
)
from ...application.use_cases.profile import (
    UpsertProfileUseCase,
    GetProfileUseCase,
    ListProfilesUseCase,
    AddExperienceUseCase,
    RemoveExperienceUseCase,
    AddEducationUseCase,
    RemoveEducationUseCase,
    DeleteAccountUseCase,
)
from ...domain.models.caller import CallerIdentity
from ...di.container import get_container
from .dependencies import get_caller


router = APIRouter(tags=["profiles"])


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(caller: CallerIdentity = Depends(get_caller)) -> ProfileResponse:
    """
    Get the caller's own profile
    
    Raises:
        NotFound: If the caller has not created a profile yet
    """
    container = get_container()
    get_profile_use_case = container.get(GetProfileUseCase)
    return await get_profile_use_case.execute(caller.user_id)


@router.post("", response_model=ProfileResponse)
async def upsert_profile(
    request: ProfileUpsertRequest,
    caller: CallerIdentity = Depends(get_caller),
) -> ProfileResponse:
    """
    Create the caller's profile or update the supplied fields of it
    
    Args:
        request: Profile fields; status and skills are required
        caller: Authenticated caller
        
    Returns:
        ProfileResponse with the stored profile
    """
    container = get_container()
    upsert_use_case = container.get(UpsertProfileUseCase)
    return await upsert_use_case.execute(caller.user_id, request)


@router.get("", response_model=List[ProfileResponse])
async def list_profiles() -> List[ProfileResponse]:
    """List all profiles with their owners (public)"""
    container = get_container()
    list_use_case = container.get(ListProfilesUseCase)
    return await list_use_case.execute()


@router.get("/user/{user_id}", response_model=ProfileResponse)
async def get_profile_by_user(user_id: str) -> ProfileResponse:
    """Get a user's profile by user ID (public)"""
    container = get_container()
    get_profile_use_case = container.get(GetProfileUseCase)
    return await get_profile_use_case.execute(user_id)


@router.delete("", response_model=DeleteAccountResponse)
async def delete_account(caller: CallerIdentity = Depends(get_caller)) -> DeleteAccountResponse:
    """
    Delete the caller's posts, profile and user account
    
    Returns:
        DeleteAccountResponse with the number of posts removed
    """
    container = get_container()
    delete_use_case = container.get(DeleteAccountUseCase)
    return await delete_use_case.execute(caller.user_id)


@router.put("/experience", response_model=ProfileResponse)
async def add_experience(
    request: ExperienceCreateRequest,
    caller: CallerIdentity = Depends(get_caller),
) -> ProfileResponse:
    container = get_container()
    add_use_case = container.get(AddExperienceUseCase)
    return await add_use_case.execute(caller.user_id, request)


@router.delete("/experience/{experience_id}", response_model=ProfileResponse)
async def remove_experience(
    experience_id: str,
    caller: CallerIdentity = Depends(get_caller),
) -> ProfileResponse:
    container = get_container()
    remove_use_case = container.get(RemoveExperienceUseCase)
    return await remove_use_case.execute(caller.user_id, experience_id)


@router.put("/education", response_model=ProfileResponse)
async def add_education(
    request: EducationCreateRequest,
    caller: CallerIdentity = Depends(get_caller),
) -> ProfileResponse:
    container = get_container()
    add_use_case = container.get(AddEducationUseCase)
    return await add_use_case.execute(caller.user_id, request)


@router.delete("/education/{education_id}", response_model=ProfileResponse)
async def remove_education(
    education_id: str,
    caller: CallerIdentity = Depends(get_caller),
) -> ProfileResponse:
    container = get_container()
    remove_use_case = container.get(RemoveEducationUseCase)
    return await remove_use_case.execute(caller.user_id, education_id)

from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.profile_repository import ProfileRepository
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.transaction_runner import TransactionRunner
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

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProfileProvider:
    """Profile use case provider - registers all profile-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all profile use cases.
        Read-modify-write use cases get the configured retry budget.
        """
        max_attempts = get_settings().mutation_max_attempts
        
        container.register_factory(
            UpsertProfileUseCase,
            lambda: UpsertProfileUseCase(
                profile_repository=container.get(ProfileRepository),
                max_attempts=max_attempts,
            )
        )
        
        container.register_factory(
            GetProfileUseCase,
            lambda: GetProfileUseCase(
                profile_repository=container.get(ProfileRepository),
                user_repository=container.get(UserRepository),
            )
        )
        
        container.register_factory(
            ListProfilesUseCase,
            lambda: ListProfilesUseCase(
                profile_repository=container.get(ProfileRepository),
                user_repository=container.get(UserRepository),
            )
        )
        
        # Embedded list mutations all share the same shape
        for use_case in (
            AddExperienceUseCase,
            RemoveExperienceUseCase,
            AddEducationUseCase,
            RemoveEducationUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    profile_repository=container.get(ProfileRepository),
                    max_attempts=max_attempts,
                )
            )
        
        container.register_factory(
            DeleteAccountUseCase,
            lambda: DeleteAccountUseCase(
                user_repository=container.get(UserRepository),
                profile_repository=container.get(ProfileRepository),
                post_repository=container.get(PostRepository),
                transaction_runner=container.get(TransactionRunner),
            )
        )

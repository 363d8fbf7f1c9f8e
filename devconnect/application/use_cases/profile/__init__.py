from .upsert_profile import UpsertProfileUseCase
from .get_profile import GetProfileUseCase
from .list_profiles import ListProfilesUseCase
from .add_experience import AddExperienceUseCase
from .remove_experience import RemoveExperienceUseCase
from .add_education import AddEducationUseCase
from .remove_education import RemoveEducationUseCase
from .delete_account import DeleteAccountUseCase

__all__ = [
    "UpsertProfileUseCase",
    "GetProfileUseCase",
    "ListProfilesUseCase",
    "AddExperienceUseCase",
    "RemoveExperienceUseCase",
    "AddEducationUseCase",
    "RemoveEducationUseCase",
    "DeleteAccountUseCase",
]

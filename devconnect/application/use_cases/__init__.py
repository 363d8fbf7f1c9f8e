from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    ResolveCallerUseCase,
    GetCurrentUserUseCase,
)
from .profile import (
    UpsertProfileUseCase,
    GetProfileUseCase,
    ListProfilesUseCase,
    AddExperienceUseCase,
    RemoveExperienceUseCase,
    AddEducationUseCase,
    RemoveEducationUseCase,
    DeleteAccountUseCase,
)
from .post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    DeletePostUseCase,
    LikePostUseCase,
    UnlikePostUseCase,
    AddCommentUseCase,
    RemoveCommentUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "ResolveCallerUseCase",
    "GetCurrentUserUseCase",
    "UpsertProfileUseCase",
    "GetProfileUseCase",
    "ListProfilesUseCase",
    "AddExperienceUseCase",
    "RemoveExperienceUseCase",
    "AddEducationUseCase",
    "RemoveEducationUseCase",
    "DeleteAccountUseCase",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "DeletePostUseCase",
    "LikePostUseCase",
    "UnlikePostUseCase",
    "AddCommentUseCase",
    "RemoveCommentUseCase",
]

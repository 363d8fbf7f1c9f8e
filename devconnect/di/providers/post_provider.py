from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...application.use_cases.post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    DeletePostUseCase,
    LikePostUseCase,
    UnlikePostUseCase,
    AddCommentUseCase,
    RemoveCommentUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all post-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        max_attempts = get_settings().mutation_max_attempts
        
        container.register_factory(
            CreatePostUseCase,
            lambda: CreatePostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
            )
        )
        
        container.register_factory(
            ListPostsUseCase,
            lambda: ListPostsUseCase(post_repository=container.get(PostRepository)),
        )
        
        container.register_factory(
            GetPostUseCase,
            lambda: GetPostUseCase(post_repository=container.get(PostRepository)),
        )
        
        container.register_factory(
            DeletePostUseCase,
            lambda: DeletePostUseCase(post_repository=container.get(PostRepository)),
        )
        
        container.register_factory(
            LikePostUseCase,
            lambda: LikePostUseCase(
                post_repository=container.get(PostRepository),
                max_attempts=max_attempts,
            )
        )
        
        container.register_factory(
            UnlikePostUseCase,
            lambda: UnlikePostUseCase(
                post_repository=container.get(PostRepository),
                max_attempts=max_attempts,
            )
        )
        
        container.register_factory(
            AddCommentUseCase,
            lambda: AddCommentUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
                max_attempts=max_attempts,
            )
        )
        
        container.register_factory(
            RemoveCommentUseCase,
            lambda: RemoveCommentUseCase(
                post_repository=container.get(PostRepository),
                max_attempts=max_attempts,
            )
        )

from .create_post import CreatePostUseCase
from .list_posts import ListPostsUseCase
from .get_post import GetPostUseCase
from .delete_post import DeletePostUseCase
from .like_post import LikePostUseCase
from .unlike_post import UnlikePostUseCase
from .add_comment import AddCommentUseCase
from .remove_comment import RemoveCommentUseCase

__all__ = [
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "DeletePostUseCase",
    "LikePostUseCase",
    "UnlikePostUseCase",
    "AddCommentUseCase",
    "RemoveCommentUseCase",
]

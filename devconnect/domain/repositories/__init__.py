from .user_repository import UserRepository
from .profile_repository import ProfileRepository
from .post_repository import PostRepository
from .transaction_runner import TransactionRunner

__all__ = ["UserRepository", "ProfileRepository", "PostRepository", "TransactionRunner"]

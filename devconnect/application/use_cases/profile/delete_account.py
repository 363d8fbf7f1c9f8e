# Standard library imports
import logging
from typing import Any, List, Optional

# Local application imports
from ....core.errors import PartialDeletion, StorageFailure
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.transaction_runner import TransactionRunner
from ....domain.repositories.user_repository import UserRepository
from ...dto.profile_dto import DeleteAccountResponse

logger = logging.getLogger(__name__)

STEP_POSTS = "posts"
STEP_PROFILE = "profile"
STEP_USER = "user"


class DeleteAccountUseCase:
    """
    Use case for deleting the caller's account.
    
    Deletes the caller's posts, then their profile, then the user record.
    With a transactional store the three steps commit or abort together.
    Without one they run in that fixed order and a failure after the first
    step raises PartialDeletion naming what was already removed.
    """
    
    def __init__(
        self,
        user_repository: UserRepository,
        profile_repository: ProfileRepository,
        post_repository: PostRepository,
        transaction_runner: TransactionRunner,
    ) -> None:
        self.user_repository = user_repository
        self.profile_repository = profile_repository
        self.post_repository = post_repository
        self.transaction_runner = transaction_runner
    
    async def execute(self, user_id: str) -> DeleteAccountResponse:
        """
        Cascade-delete posts, profile and user for ``user_id``
        
        Returns:
            DeleteAccountResponse with the number of posts removed
            
        Raises:
            StorageFailure: If the transactional delete aborted (nothing removed)
            PartialDeletion: If a non-transactional delete stopped part-way
        """
        logger.info(
            f"Deleting account {user_id} "
            f"({'atomic' if self.transaction_runner.is_atomic else 'ordered steps'})"
        )
        posts_deleted = await self.transaction_runner.run(
            lambda session: self._delete_all(user_id, session)
        )
        logger.info(f"Deleted account {user_id} and {posts_deleted} post(s)")
        return DeleteAccountResponse(posts_deleted=posts_deleted)
    
    async def _delete_all(self, user_id: str, session: Optional[Any]) -> int:
        completed: List[str] = []
        step = STEP_POSTS
        try:
            posts_deleted = await self.post_repository.delete_by_user(user_id, session=session)
            completed.append(step)
            
            step = STEP_PROFILE
            await self.profile_repository.delete_by_user(user_id, session=session)
            completed.append(step)
            
            step = STEP_USER
            await self.user_repository.delete(user_id, session=session)
            completed.append(step)
        except StorageFailure as e:
            # Inside a transaction the abort undoes the earlier steps
            if session is None and completed:
                logger.error(
                    f"Account deletion for {user_id} stopped at '{step}' after {completed}: {e}"
                )
                raise PartialDeletion(completed_steps=completed, failed_step=step) from e
            raise
        return posts_deleted

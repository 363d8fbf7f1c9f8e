from abc import ABC, abstractmethod
from typing import Any, List, Optional
from ..models.post import Post


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""
    
    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass
    
    @abstractmethod
    async def list_newest_first(self) -> List[Post]:
        """List all posts ordered by creation time, newest first"""
        pass
    
    @abstractmethod
    async def save(self, post: Post) -> Post:
        """
        Save post (create or update).
        
        Updates are conditional on ``post.version`` still matching the stored
        document; a mismatch raises ConcurrentModification.
        """
        pass
    
    @abstractmethod
    async def delete(self, post_id: str) -> bool:
        """Delete post by ID; returns True if a document was removed"""
        pass
    
    @abstractmethod
    async def delete_by_user(self, user_id: str, session: Optional[Any] = None) -> int:
        """Delete every post owned by a user; returns the number removed"""
        pass

from abc import ABC, abstractmethod
from typing import Any, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def find_by_ids(self, user_ids: List[str]) -> List[User]:
        """Find all users whose ID is in user_ids (unknown IDs are skipped)"""
        pass
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass
    
    @abstractmethod
    async def delete(self, user_id: str, session: Optional[Any] = None) -> bool:
        """Delete user; returns True if a document was removed"""
        pass

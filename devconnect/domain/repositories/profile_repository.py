from abc import ABC, abstractmethod
from typing import Any, List, Optional
from ..models.profile import Profile


class ProfileRepository(ABC):
    """Repository interface - defines contract for profile data access"""
    
    @abstractmethod
    async def find_by_user(self, user_id: str) -> Optional[Profile]:
        """Find the profile owned by a user"""
        pass
    
    @abstractmethod
    async def list_all(self) -> List[Profile]:
        """List every profile"""
        pass
    
    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """
        Save profile (create or update).
        
        Updates are conditional on ``profile.version`` still matching the
        stored document; a mismatch raises ConcurrentModification.
        """
        pass
    
    @abstractmethod
    async def delete_by_user(self, user_id: str, session: Optional[Any] = None) -> bool:
        """Delete the profile owned by a user; returns True if one was removed"""
        pass

"""
User Repository Interface
=========================

Abstract interface for user data access.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from posts_api.domain.models.user import User
from posts_api.domain.repositories.delete_outcome import DeleteOutcome


class UserRepository(ABC):
    """Abstract repository for user operations."""
    
    @abstractmethod
    async def list_all(self) -> List[User]:
        """Fetch every user."""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by its ID.
        
        Returns:
            User if found, None when the upstream answers 404
        """
        pass
    
    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a user upstream and return the echoed record."""
        pass
    
    @abstractmethod
    async def update(self, user_id: int, user: User) -> User:
        """Replace a user upstream and return the echoed record."""
        pass
    
    @abstractmethod
    async def delete(self, user_id: int) -> DeleteOutcome:
        """Delete a user upstream. Never raises for request-level failures."""
        pass

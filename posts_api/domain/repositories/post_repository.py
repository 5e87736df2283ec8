"""
Post Repository Interface
=========================

Abstract interface for post data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from posts_api.domain.models.post import Post
from posts_api.domain.repositories.delete_outcome import DeleteOutcome


class PostRepository(ABC):
    """
    Abstract repository for post operations.
    
    This interface defines the contract for post data access.
    Concrete implementations should be in the infrastructure layer.
    """
    
    @abstractmethod
    async def list_all(self) -> List[Post]:
        """
        Fetch every post.
        
        Returns:
            List of posts, empty when the upstream has none
            
        Raises:
            UpstreamError: On network fault or non-success status
        """
        pass
    
    @abstractmethod
    async def find_by_id(self, post_id: int) -> Optional[Post]:
        """
        Find a post by its ID.
        
        Args:
            post_id: Upstream post identifier
            
        Returns:
            Post if found, None when the upstream answers 404
            
        Raises:
            UpstreamError: On any other failure
        """
        pass
    
    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> List[Post]:
        """
        Find all posts written by a user.
        
        Args:
            user_id: Author identifier
            
        Returns:
            List of posts, empty when the user has none
        """
        pass
    
    @abstractmethod
    async def create(self, post: Post) -> Post:
        """
        Create a post upstream.
        
        Args:
            post: Post to create (its id is ignored)
            
        Returns:
            The created post as echoed by the upstream, with its assigned id
        """
        pass
    
    @abstractmethod
    async def update(self, post_id: int, post: Post) -> Post:
        """
        Replace a post upstream.
        
        Args:
            post_id: Identifier of the post to replace
            post: Full replacement record
            
        Returns:
            The upstream's representation of the updated post
        """
        pass
    
    @abstractmethod
    async def delete(self, post_id: int) -> DeleteOutcome:
        """
        Delete a post upstream. Never raises for request-level failures.
        
        Args:
            post_id: Identifier of the post to delete
            
        Returns:
            DeleteOutcome, truthy only when the post was deleted
        """
        pass

"""
Update Post Use Case
====================

Rewrites title and content of an existing post and submits the full
record as a replacement.
"""
import logging

from posts_api.domain.exceptions import NotFoundError
from posts_api.domain.models.post import Post
from posts_api.domain.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Use case for updating a post."""
    
    def __init__(self, post_repository: PostRepository):
        self._repository = post_repository
    
    async def execute(self, post_id: int, title: str, content: str) -> Post:
        """
        Execute the update post use case.
        
        The author of the stored record is kept; callers cannot move a post
        to another user.
        
        Args:
            post_id: Identifier of the post to update
            title: New title
            content: New body
            
        Returns:
            The upstream's representation of the updated post
            
        Raises:
            NotFoundError: If the post does not exist
            UpstreamError: If the upstream fails
        """
        existing_post = await self._repository.find_by_id(post_id)
        if existing_post is None:
            logger.info(f"Update rejected, post {post_id} does not exist")
            raise NotFoundError("Post", post_id)
        
        existing_post.rewrite(title=title, body=content)
        return await self._repository.update(post_id, existing_post)

"""
Create Post Use Case
====================

Builds a new post and hands it to the upstream, which assigns its id.
"""
from posts_api.domain.models.post import Post
from posts_api.domain.repositories.post_repository import PostRepository


class CreatePostUseCase:
    """
    Use case for creating a post.
    
    No validation happens here: title and content are passed through
    verbatim (empty strings included) and the upstream enforces whatever
    it enforces.
    """
    
    def __init__(self, post_repository: PostRepository):
        """
        Initialize use case with repository.
        
        Args:
            post_repository: Repository for upstream posts
        """
        self._repository = post_repository
    
    async def execute(self, title: str, content: str, user_id: int) -> Post:
        """
        Execute the create post use case.
        
        Args:
            title: Post title
            content: Post body
            user_id: Author identifier
            
        Returns:
            The created post as echoed by the upstream
        """
        return await self._repository.create(Post(title=title, body=content, user_id=user_id))

"""
Post Service
============

Application service that joins posts with their authors and reshapes
them into response DTOs.

Reads that touch both resources issue independent upstream calls. The
upstream offers no snapshot isolation, so an enriched response is a
best-effort view: a post and its author may come from different
moments if either changed upstream in between.
"""
import asyncio
import logging
from typing import Dict, List, Optional

from posts_api.application.dto.post_dto import PostResponse
from posts_api.application.dto.user_dto import UserSummaryResponse
from posts_api.application.use_cases.post import CreatePostUseCase, UpdatePostUseCase
from posts_api.domain.models.post import Post
from posts_api.domain.models.user import User
from posts_api.domain.repositories.delete_outcome import DeleteOutcome
from posts_api.domain.repositories.post_repository import PostRepository
from posts_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

DEFAULT_UNKNOWN_AUTHOR = "Unknown"


class PostService:
    """
    Application service for post operations.
    
    This service coordinates the post and user repositories and the post
    use cases, and owns the enrichment rules (author name, word count).
    """
    
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        unknown_author_name: str = DEFAULT_UNKNOWN_AUTHOR,
    ):
        """
        Initialize service with repositories.
        
        Args:
            post_repository: Repository for upstream posts
            user_repository: Repository for upstream users
            unknown_author_name: Author name used when a post's user does not exist
        """
        self._post_repository = post_repository
        self._user_repository = user_repository
        self._unknown_author_name = unknown_author_name
        self._create_use_case = CreatePostUseCase(post_repository)
        self._update_use_case = UpdatePostUseCase(post_repository)
    
    def _to_response(self, post: Post, author: Optional[User]) -> PostResponse:
        """Join a post with its author and derive the computed fields."""
        return PostResponse(
            id=post.id,
            title=post.title,
            content=post.body,
            author_name=author.name if author is not None else self._unknown_author_name,
            word_count=post.word_count(),
        )
    
    async def list_all_posts_enriched(self) -> List[PostResponse]:
        """
        List every post with its author name.
        
        Posts whose author is missing are kept, with the fallback name.
        """
        posts, users = await asyncio.gather(
            self._post_repository.list_all(),
            self._user_repository.list_all(),
        )
        users_by_id: Dict[Optional[int], User] = {user.id: user for user in users}
        logger.debug(f"Enriching {len(posts)} posts with {len(users_by_id)} users")
        return [self._to_response(post, users_by_id.get(post.user_id)) for post in posts]
    
    async def get_post_enriched(self, post_id: int) -> Optional[PostResponse]:
        """
        Get one enriched post.
        
        Returns:
            PostResponse if the post exists, None otherwise
        """
        post = await self._post_repository.find_by_id(post_id)
        if post is None:
            return None
        author = await self._user_repository.find_by_id(post.user_id)
        return self._to_response(post, author)
    
    async def list_posts_by_user_enriched(self, user_id: int) -> List[PostResponse]:
        """List the posts of one user; the author is fetched once for all of them."""
        posts = await self._post_repository.find_by_user_id(user_id)
        author = await self._user_repository.find_by_id(user_id)
        return [self._to_response(post, author) for post in posts]
    
    async def get_user_summary(self, user_id: int) -> Optional[UserSummaryResponse]:
        """
        Summarize a user with their post count.
        
        Returns:
            UserSummaryResponse (``totalPosts`` may be 0) or None if the user does not exist
        """
        user = await self._user_repository.find_by_id(user_id)
        if user is None:
            return None
        posts = await self._post_repository.find_by_user_id(user_id)
        return UserSummaryResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            total_posts=len(posts),
        )
    
    async def create_post(self, title: str, content: str, user_id: int) -> PostResponse:
        """Create a post and return it enriched with its author."""
        created_post = await self._create_use_case.execute(title=title, content=content, user_id=user_id)
        author = await self._user_repository.find_by_id(user_id)
        return self._to_response(created_post, author)
    
    async def update_post(self, post_id: int, title: str, content: str) -> PostResponse:
        """
        Replace title and content of a post.
        
        Raises:
            NotFoundError: If the post does not exist
        """
        updated_post = await self._update_use_case.execute(post_id=post_id, title=title, content=content)
        # Author comes from the record the upstream echoed back
        author = await self._user_repository.find_by_id(updated_post.user_id)
        return self._to_response(updated_post, author)
    
    async def delete_post(self, post_id: int) -> DeleteOutcome:
        """Delete a post. The outcome is falsy unless the post was deleted."""
        return await self._post_repository.delete(post_id)

from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.services.post_service import PostService

if TYPE_CHECKING:
    from ..base_container import BaseContainer
    from ...core.config import Settings


class PostProvider:
    """Post service provider - registers post-related services"""
    
    @staticmethod
    def register(container: "BaseContainer", settings: "Settings") -> None:
        """
        Register post service.
        Service is created with both repositories from container.
        """
        container.register_singleton(
            PostService,
            PostService(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
                unknown_author_name=settings.unknown_author_name,
            )
        )

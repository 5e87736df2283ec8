from typing import TYPE_CHECKING
from .http_client_provider import HTTP_CLIENT_KEY
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.http.http_post_repository import HttpPostRepository
from ...infrastructure.http.http_user_repository import HttpUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the shared HTTP client from the client provider and creates repository instances.
        """
        client = container.get(HTTP_CLIENT_KEY)
        
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            PostRepository,
            HttpPostRepository(client)
        )
        
        container.register_singleton(
            UserRepository,
            HttpUserRepository(client)
        )

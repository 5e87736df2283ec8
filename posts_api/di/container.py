# Standard library imports
import logging
from typing import Optional

import httpx

# Local application imports
from .base_container import BaseContainer
from .providers import (
    HttpClientProvider,
    RepositoryProvider,
    PostProvider,
    UserProvider,
)
from .providers.http_client_provider import HTTP_CLIENT_KEY
from posts_api.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Shared upstream HTTP client (HttpClientProvider)
    2. Repositories (RepositoryProvider) - depend on the HTTP client
    3. Services (PostProvider, UserProvider) - depend on repositories
    """
    
    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self._transport = transport
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: http client → repositories → services
        """
        # Step 1: Register the shared upstream client (foundation)
        HttpClientProvider.register(self, self.settings, transport=self._transport)
        
        # Step 2: Register repositories (depend on the client)
        RepositoryProvider.register(self)
        
        # Step 3: Register services (depend on repositories)
        PostProvider.register(self, self.settings)
        UserProvider.register(self)
    
    async def aclose(self) -> None:
        """Close the shared upstream client."""
        client: httpx.AsyncClient = self.get(HTTP_CLIENT_KEY)
        await client.aclose()
        logger.info("Upstream HTTP client closed")


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


async def reset_container() -> None:
    """Close and forget the global container; the next lookup builds a new one."""
    global _container
    if _container is not None:
        await _container.aclose()
        _container = None

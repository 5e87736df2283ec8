"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .http_client_provider import HttpClientProvider
from .repository_provider import RepositoryProvider
from .post_provider import PostProvider
from .user_provider import UserProvider

__all__ = [
    "HttpClientProvider",
    "RepositoryProvider",
    "PostProvider",
    "UserProvider",
]

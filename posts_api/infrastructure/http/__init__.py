"""
HTTP Infrastructure
===================

Shared httpx client and the repositories that talk to the upstream API.
"""
from posts_api.infrastructure.http.client import UpstreamClientConfig, build_async_client
from posts_api.infrastructure.http.http_post_repository import HttpPostRepository
from posts_api.infrastructure.http.http_user_repository import HttpUserRepository

__all__ = [
    "UpstreamClientConfig",
    "build_async_client",
    "HttpPostRepository",
    "HttpUserRepository",
]

"""
Dependency Container
====================

FastAPI dependency getters backed by the DI container.
Tests replace them through ``app.dependency_overrides``.
"""
from posts_api.application.services.post_service import PostService
from posts_api.application.services.user_service import UserService
from posts_api.di.container import get_container


def get_post_service() -> PostService:
    """
    Get post service instance (singleton).
    
    Returns:
        PostService instance
    """
    container = get_container()
    return container.get(PostService)


def get_user_service() -> UserService:
    """
    Get user service instance (singleton).
    
    Returns:
        UserService instance
    """
    container = get_container()
    return container.get(UserService)

"""
API v1 Package
===============

Version 1 API controllers.
"""
from .post_controller import router as post_router
from .user_controller import router as user_router

__all__ = ["post_router", "user_router"]

from .post_service import PostService
from .user_service import UserService

__all__ = ["PostService", "UserService"]

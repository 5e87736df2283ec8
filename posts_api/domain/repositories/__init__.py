from .delete_outcome import DeleteOutcome
from .post_repository import PostRepository
from .user_repository import UserRepository

__all__ = ["DeleteOutcome", "PostRepository", "UserRepository"]

from .create_post import CreatePostUseCase
from .update_post import UpdatePostUseCase

__all__ = ["CreatePostUseCase", "UpdatePostUseCase"]

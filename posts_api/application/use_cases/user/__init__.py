from .update_user import UpdateUserUseCase

__all__ = ["UpdateUserUseCase"]

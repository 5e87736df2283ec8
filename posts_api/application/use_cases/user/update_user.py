"""
Update User Use Case
====================

Overwrites every mutable field of an existing user.
"""
import logging

from posts_api.domain.exceptions import NotFoundError
from posts_api.domain.models.user import User
from posts_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating a user."""
    
    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository
    
    async def execute(self, user_id: int, name: str, username: str, email: str) -> User:
        """
        Replace name, username and email of a user.
        
        Raises:
            NotFoundError: If the user does not exist
        """
        existing_user = await self._repository.find_by_id(user_id)
        if existing_user is None:
            logger.info(f"Update rejected, user {user_id} does not exist")
            raise NotFoundError("User", user_id)
        
        existing_user.update_profile(name=name, username=username, email=email)
        return await self._repository.update(user_id, existing_user)

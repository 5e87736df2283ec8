"""
User Service
============

Application service for user operations. Users are mapped 1:1 to
response DTOs; there are no derived fields.
"""
from typing import List, Optional

from posts_api.application.dto.user_dto import UserResponse
from posts_api.application.use_cases.user import UpdateUserUseCase
from posts_api.domain.models.user import User
from posts_api.domain.repositories.delete_outcome import DeleteOutcome
from posts_api.domain.repositories.user_repository import UserRepository


class UserService:
    """Application service for user operations."""
    
    def __init__(self, user_repository: UserRepository):
        """
        Initialize service with repository.
        
        Args:
            user_repository: Repository for upstream users
        """
        self._repository = user_repository
        self._update_use_case = UpdateUserUseCase(user_repository)
    
    @staticmethod
    def _to_response(user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            name=user.name,
            username=user.username,
            email=user.email,
        )
    
    async def list_all_users(self) -> List[UserResponse]:
        users = await self._repository.list_all()
        return [self._to_response(user) for user in users]
    
    async def get_user(self, user_id: int) -> Optional[UserResponse]:
        """Get a user by ID, None if it does not exist."""
        user = await self._repository.find_by_id(user_id)
        if user is None:
            return None
        return self._to_response(user)
    
    async def create_user(self, name: str, username: str, email: str) -> UserResponse:
        created_user = await self._repository.create(User(name=name, username=username, email=email))
        return self._to_response(created_user)
    
    async def update_user(self, user_id: int, name: str, username: str, email: str) -> UserResponse:
        """
        Replace every mutable field of a user.
        
        Raises:
            NotFoundError: If the user does not exist
        """
        updated_user = await self._update_use_case.execute(
            user_id=user_id,
            name=name,
            username=username,
            email=email,
        )
        return self._to_response(updated_user)
    
    async def delete_user(self, user_id: int) -> DeleteOutcome:
        """Delete a user. The outcome is falsy unless the user was deleted."""
        return await self._repository.delete(user_id)

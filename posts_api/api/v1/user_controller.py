"""
User Controller
===============

FastAPI controller for user endpoints, including the per-user post
summary.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from posts_api.api.v1.dependencies import get_post_service, get_user_service
from posts_api.application.dto.user_dto import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
    UserSummaryResponse,
)
from posts_api.application.services.post_service import PostService
from posts_api.application.services.user_service import UserService
from posts_api.domain.exceptions import NotFoundError, UpstreamError
from posts_api.domain.repositories.delete_outcome import DeleteOutcome

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
)
async def list_users(
    service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    """List all users."""
    return await service.list_all_users()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get a specific user by ID."""
    user = await service.get_user(user_id)
    
    if user is None:
        raise NotFoundError("User", user_id)
    
    return user


@router.get(
    "/{user_id}/summary",
    response_model=UserSummaryResponse,
    summary="Get user summary",
    description="Get a user with the number of posts they wrote."
)
async def get_user_summary(
    user_id: int,
    service: PostService = Depends(get_post_service),
) -> UserSummaryResponse:
    """Get a user summary with post statistics."""
    summary = await service.get_user_summary(user_id)
    
    if summary is None:
        raise NotFoundError("User", user_id)
    
    return summary


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
async def create_user(
    request: CreateUserRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user."""
    user = await service.create_user(
        name=request.name,
        username=request.username,
        email=request.email,
    )
    logger.info(f"User {user.id} created")
    return user


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
    description="Replace name, username and email of a user."
)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update a user."""
    return await service.update_user(
        user_id=user_id,
        name=request.name,
        username=request.username,
        email=request.email,
    )


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a user",
)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user."""
    outcome = await service.delete_user(user_id)
    
    if outcome is DeleteOutcome.NOT_FOUND:
        raise NotFoundError("User", user_id)
    if outcome is DeleteOutcome.UPSTREAM_FAILURE:
        raise UpstreamError(f"Upstream could not delete user {user_id}")
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""
Post Controller
===============

FastAPI controller for post endpoints.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from posts_api.api.v1.dependencies import get_post_service
from posts_api.application.dto.post_dto import (
    CreatePostRequest,
    PostResponse,
    UpdatePostRequest,
)
from posts_api.application.services.post_service import PostService
from posts_api.domain.exceptions import NotFoundError, UpstreamError
from posts_api.domain.repositories.delete_outcome import DeleteOutcome

logger = logging.getLogger(__name__)
router = APIRouter(tags=["posts"])


@router.get(
    "",
    response_model=List[PostResponse],
    summary="List posts",
    description="Get every post enriched with its author name and word count."
)
async def list_posts(
    service: PostService = Depends(get_post_service),
) -> List[PostResponse]:
    """List all enriched posts."""
    return await service.list_all_posts_enriched()


@router.get(
    "/user/{user_id}",
    response_model=List[PostResponse],
    summary="List posts of a user",
    description="Get the posts written by one user. Unknown users yield an empty list."
)
async def list_posts_by_user(
    user_id: int,
    service: PostService = Depends(get_post_service),
) -> List[PostResponse]:
    """List enriched posts of a user."""
    return await service.list_posts_by_user_enriched(user_id)


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get post by ID",
    description="Get one enriched post."
)
async def get_post(
    post_id: int,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Get a specific post by ID."""
    post = await service.get_post_enriched(post_id)
    
    if post is None:
        raise NotFoundError("Post", post_id)
    
    return post


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
    description="""
    Create a post upstream.
    
    The upstream assigns the id. Title and content are passed through
    verbatim; the response carries the author name and word count.
    """
)
async def create_post(
    request: CreatePostRequest,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Create a post."""
    post = await service.create_post(
        title=request.title,
        content=request.content,
        user_id=request.user_id,
    )
    logger.info(f"Post {post.id} created by user {request.user_id}")
    return post


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    summary="Update a post",
    description="Replace title and content of a post. The author is kept."
)
async def update_post(
    post_id: int,
    request: UpdatePostRequest,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Update a post."""
    return await service.update_post(
        post_id=post_id,
        title=request.title,
        content=request.content,
    )


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a post",
)
async def delete_post(
    post_id: int,
    service: PostService = Depends(get_post_service),
) -> Response:
    """Delete a post."""
    outcome = await service.delete_post(post_id)
    
    if outcome is DeleteOutcome.NOT_FOUND:
        raise NotFoundError("Post", post_id)
    if outcome is DeleteOutcome.UPSTREAM_FAILURE:
        raise UpstreamError(f"Upstream could not delete post {post_id}")
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)

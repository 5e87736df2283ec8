"""
HTTP Post Repository
====================

Concrete implementation of PostRepository backed by the upstream
``posts`` resource.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from posts_api.domain.constants.post_fields import PostFields
from posts_api.domain.exceptions import UpstreamError
from posts_api.domain.models.post import Post
from posts_api.domain.repositories.delete_outcome import DeleteOutcome
from posts_api.domain.repositories.post_repository import PostRepository
from posts_api.infrastructure.http.client import (
    decode_json,
    decode_json_list,
    ensure_success,
    send_request,
)

logger = logging.getLogger(__name__)


class HttpPostRepository(PostRepository):
    """
    HTTP implementation of PostRepository.
    
    Handles all post operations against the upstream JSON API.
    """
    
    RESOURCE_PATH = "posts"
    
    def __init__(self, client: httpx.AsyncClient):
        """
        Initialize repository with the shared upstream client.
        
        Args:
            client: Shared ``httpx.AsyncClient`` (base URL already set)
        """
        self._client = client
    
    def _to_entity(self, payload: Any) -> Post:
        """Convert an upstream JSON object to a Post entity."""
        try:
            return Post(
                id=int(payload[PostFields.ID]),
                title=str(payload.get(PostFields.TITLE) or ""),
                body=str(payload.get(PostFields.BODY) or ""),
                user_id=int(payload[PostFields.USER_ID]),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            logger.error(f"Upstream sent a malformed post: {payload!r}")
            raise UpstreamError(f"Upstream sent a malformed post: {payload!r}") from exc
    
    def _to_document(self, post: Post, include_id: bool = True) -> Dict[str, Any]:
        """Convert a Post entity to an upstream JSON object."""
        doc: Dict[str, Any] = {
            PostFields.TITLE: post.title,
            PostFields.BODY: post.body,
            PostFields.USER_ID: post.user_id,
        }
        if include_id and post.id is not None:
            doc[PostFields.ID] = post.id
        return doc
    
    def _item_path(self, post_id: int) -> str:
        return f"{self.RESOURCE_PATH}/{post_id}"
    
    async def list_all(self) -> List[Post]:
        """Fetch every post."""
        action = "listing posts"
        response = await send_request(self._client, "GET", self.RESOURCE_PATH, action=action)
        ensure_success(response, action=action)
        return [self._to_entity(item) for item in decode_json_list(response, action=action)]
    
    async def find_by_id(self, post_id: int) -> Optional[Post]:
        """Find a post by its ID; a 404 means absent."""
        action = f"fetching post {post_id}"
        response = await send_request(self._client, "GET", self._item_path(post_id), action=action)
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        ensure_success(response, action=action)
        payload = decode_json(response, action=action)
        if payload is None:
            raise UpstreamError(f"Upstream sent an empty body while {action}")
        return self._to_entity(payload)
    
    async def find_by_user_id(self, user_id: int) -> List[Post]:
        """Find all posts of a user, filtered upstream by query string."""
        action = f"listing posts of user {user_id}"
        response = await send_request(
            self._client,
            "GET",
            self.RESOURCE_PATH,
            action=action,
            params={PostFields.USER_ID_FILTER: user_id},
        )
        ensure_success(response, action=action)
        return [self._to_entity(item) for item in decode_json_list(response, action=action)]
    
    async def create(self, post: Post) -> Post:
        """Create a post; the upstream assigns the id."""
        action = "creating post"
        response = await send_request(
            self._client,
            "POST",
            self.RESOURCE_PATH,
            action=action,
            json=self._to_document(post, include_id=False),
        )
        ensure_success(response, action=action)
        payload = decode_json(response, action=action)
        if payload is None:
            raise UpstreamError(f"Upstream sent an empty body while {action}")
        created = self._to_entity(payload)
        logger.info(f"Post {created.id} created for user {created.user_id}")
        return created
    
    async def update(self, post_id: int, post: Post) -> Post:
        """Replace a post and return the upstream's echo."""
        action = f"updating post {post_id}"
        response = await send_request(
            self._client,
            "PUT",
            self._item_path(post_id),
            action=action,
            json=self._to_document(post),
        )
        ensure_success(response, action=action)
        payload = decode_json(response, action=action)
        if payload is None:
            raise UpstreamError(f"Upstream sent an empty body while {action}")
        return self._to_entity(payload)
    
    async def delete(self, post_id: int) -> DeleteOutcome:
        """Delete a post. Failures are reported through the outcome, never raised."""
        action = f"deleting post {post_id}"
        try:
            response = await send_request(self._client, "DELETE", self._item_path(post_id), action=action)
        except UpstreamError:
            return DeleteOutcome.UPSTREAM_FAILURE
        
        if response.is_success:
            return DeleteOutcome.DELETED
        if response.status_code == httpx.codes.NOT_FOUND:
            return DeleteOutcome.NOT_FOUND
        logger.error(f"Upstream returned {response.status_code} while {action}")
        return DeleteOutcome.UPSTREAM_FAILURE

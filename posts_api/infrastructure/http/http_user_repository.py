"""
HTTP User Repository
====================

Concrete implementation of UserRepository backed by the upstream
``users`` resource.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from posts_api.domain.constants.user_fields import UserFields
from posts_api.domain.exceptions import UpstreamError
from posts_api.domain.models.user import User
from posts_api.domain.repositories.delete_outcome import DeleteOutcome
from posts_api.domain.repositories.user_repository import UserRepository
from posts_api.infrastructure.http.client import (
    decode_json,
    decode_json_list,
    ensure_success,
    send_request,
)

logger = logging.getLogger(__name__)


class HttpUserRepository(UserRepository):
    """HTTP implementation of UserRepository."""
    
    RESOURCE_PATH = "users"
    
    def __init__(self, client: httpx.AsyncClient):
        self._client = client
    
    def _to_entity(self, payload: Any) -> User:
        """Convert an upstream JSON object to a User entity."""
        try:
            return User(
                id=int(payload[UserFields.ID]),
                name=str(payload.get(UserFields.NAME) or ""),
                username=str(payload.get(UserFields.USERNAME) or ""),
                email=str(payload.get(UserFields.EMAIL) or ""),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            logger.error(f"Upstream sent a malformed user: {payload!r}")
            raise UpstreamError(f"Upstream sent a malformed user: {payload!r}") from exc
    
    def _to_document(self, user: User, include_id: bool = True) -> Dict[str, Any]:
        """Convert a User entity to an upstream JSON object."""
        doc: Dict[str, Any] = {
            UserFields.NAME: user.name,
            UserFields.USERNAME: user.username,
            UserFields.EMAIL: user.email,
        }
        if include_id and user.id is not None:
            doc[UserFields.ID] = user.id
        return doc
    
    def _item_path(self, user_id: int) -> str:
        return f"{self.RESOURCE_PATH}/{user_id}"
    
    def _read_one(self, response: httpx.Response, action: str) -> User:
        ensure_success(response, action=action)
        payload = decode_json(response, action=action)
        if payload is None:
            raise UpstreamError(f"Upstream sent an empty body while {action}")
        return self._to_entity(payload)
    
    async def list_all(self) -> List[User]:
        """Fetch every user."""
        action = "listing users"
        response = await send_request(self._client, "GET", self.RESOURCE_PATH, action=action)
        ensure_success(response, action=action)
        return [self._to_entity(item) for item in decode_json_list(response, action=action)]
    
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by its ID; a 404 means absent."""
        action = f"fetching user {user_id}"
        response = await send_request(self._client, "GET", self._item_path(user_id), action=action)
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        return self._read_one(response, action)
    
    async def create(self, user: User) -> User:
        """Create a user; the upstream assigns the id."""
        action = "creating user"
        response = await send_request(
            self._client,
            "POST",
            self.RESOURCE_PATH,
            action=action,
            json=self._to_document(user, include_id=False),
        )
        created = self._read_one(response, action)
        logger.info(f"User {created.id} created")
        return created
    
    async def update(self, user_id: int, user: User) -> User:
        """Replace a user and return the upstream's echo."""
        action = f"updating user {user_id}"
        response = await send_request(
            self._client,
            "PUT",
            self._item_path(user_id),
            action=action,
            json=self._to_document(user),
        )
        return self._read_one(response, action)
    
    async def delete(self, user_id: int) -> DeleteOutcome:
        """Delete a user. Failures are reported through the outcome, never raised."""
        action = f"deleting user {user_id}"
        try:
            response = await send_request(self._client, "DELETE", self._item_path(user_id), action=action)
        except UpstreamError:
            return DeleteOutcome.UPSTREAM_FAILURE
        
        if response.is_success:
            return DeleteOutcome.DELETED
        if response.status_code == httpx.codes.NOT_FOUND:
            return DeleteOutcome.NOT_FOUND
        logger.error(f"Upstream returned {response.status_code} while {action}")
        return DeleteOutcome.UPSTREAM_FAILURE

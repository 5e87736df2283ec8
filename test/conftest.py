"""
Shared fixtures: in-memory repositories, services wired to them, and an
HTTP client driving the FastAPI app without a live upstream.
"""
from dataclasses import replace
from typing import Dict, List, Optional

import httpx
import pytest

from posts_api.application.services.post_service import PostService
from posts_api.application.services.user_service import UserService
from posts_api.api.v1.dependencies import get_post_service, get_user_service
from posts_api.domain.exceptions import UpstreamError
from posts_api.domain.models.post import Post
from posts_api.domain.models.user import User
from posts_api.domain.repositories.delete_outcome import DeleteOutcome
from posts_api.domain.repositories.post_repository import PostRepository
from posts_api.domain.repositories.user_repository import UserRepository
from posts_api.main import app

UNKNOWN_AUTHOR = "Desconocido"


class InMemoryPostRepository(PostRepository):
    """PostRepository keeping posts in a dict; ``fail`` simulates an upstream outage."""
    
    def __init__(self, posts: Optional[List[Post]] = None):
        self.posts: Dict[int, Post] = {post.id: post for post in posts or []}
        self.next_id = max(self.posts, default=0) + 1
        self.fail = False
        self.updates: List[Post] = []
    
    def _check(self) -> None:
        if self.fail:
            raise UpstreamError("posts upstream unavailable", status_code=503)
    
    async def list_all(self) -> List[Post]:
        self._check()
        return [replace(post) for post in self.posts.values()]
    
    async def find_by_id(self, post_id: int) -> Optional[Post]:
        self._check()
        post = self.posts.get(post_id)
        return replace(post) if post is not None else None
    
    async def find_by_user_id(self, user_id: int) -> List[Post]:
        self._check()
        return [replace(post) for post in self.posts.values() if post.user_id == user_id]
    
    async def create(self, post: Post) -> Post:
        self._check()
        created = replace(post, id=self.next_id)
        self.next_id += 1
        self.posts[created.id] = created
        return replace(created)
    
    async def update(self, post_id: int, post: Post) -> Post:
        self._check()
        stored = replace(post, id=post_id)
        self.updates.append(stored)
        self.posts[post_id] = stored
        return replace(stored)
    
    async def delete(self, post_id: int) -> DeleteOutcome:
        if self.fail:
            return DeleteOutcome.UPSTREAM_FAILURE
        if self.posts.pop(post_id, None) is None:
            return DeleteOutcome.NOT_FOUND
        return DeleteOutcome.DELETED


class InMemoryUserRepository(UserRepository):
    """UserRepository keeping users in a dict."""
    
    def __init__(self, users: Optional[List[User]] = None):
        self.users: Dict[int, User] = {user.id: user for user in users or []}
        self.next_id = max(self.users, default=0) + 1
        self.fail = False
        self.lookups: List[int] = []
    
    def _check(self) -> None:
        if self.fail:
            raise UpstreamError("users upstream unavailable", status_code=503)
    
    async def list_all(self) -> List[User]:
        self._check()
        return [replace(user) for user in self.users.values()]
    
    async def find_by_id(self, user_id: int) -> Optional[User]:
        self._check()
        self.lookups.append(user_id)
        user = self.users.get(user_id)
        return replace(user) if user is not None else None
    
    async def create(self, user: User) -> User:
        self._check()
        created = replace(user, id=self.next_id)
        self.next_id += 1
        self.users[created.id] = created
        return replace(created)
    
    async def update(self, user_id: int, user: User) -> User:
        self._check()
        stored = replace(user, id=user_id)
        self.users[user_id] = stored
        return replace(stored)
    
    async def delete(self, user_id: int) -> DeleteOutcome:
        if self.fail:
            return DeleteOutcome.UPSTREAM_FAILURE
        if self.users.pop(user_id, None) is None:
            return DeleteOutcome.NOT_FOUND
        return DeleteOutcome.DELETED


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository([
        User(id=1, name="Leanne Graham", username="Bret", email="Sincere@april.biz"),
        User(id=2, name="Ervin Howell", username="Antonette", email="Shanna@melissa.tv"),
    ])


@pytest.fixture
def post_repository() -> InMemoryPostRepository:
    # User 1 wrote three posts, user 2 none; post 4 points at a user that does not exist
    return InMemoryPostRepository([
        Post(id=1, title="first", body="the quick  brown fox", user_id=1),
        Post(id=2, title="second", body="jumps over", user_id=1),
        Post(id=3, title="third", body="", user_id=1),
        Post(id=4, title="orphan", body="nobody wrote me", user_id=99),
    ])


@pytest.fixture
def post_service(post_repository, user_repository) -> PostService:
    return PostService(
        post_repository=post_repository,
        user_repository=user_repository,
        unknown_author_name=UNKNOWN_AUTHOR,
    )


@pytest.fixture
def user_service(user_repository) -> UserService:
    return UserService(user_repository=user_repository)


@pytest.fixture
async def api_client(post_service, user_service):
    """HTTP client bound to the app, with services backed by in-memory repositories."""
    app.dependency_overrides[get_post_service] = lambda: post_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()

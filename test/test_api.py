"""End-to-end tests of the HTTP surface with in-memory repositories."""
import httpx
import pytest

from posts_api.api.v1.dependencies import get_post_service, get_user_service
from posts_api.main import app


@pytest.mark.asyncio
async def test_health(api_client) -> None:
    response = await api_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_list_posts_uses_camel_case(api_client) -> None:
    response = await api_client.get("/posts")

    assert response.status_code == 200
    first = response.json()[0]
    assert first == {
        "id": 1,
        "title": "first",
        "content": "the quick  brown fox",
        "authorName": "Leanne Graham",
        "wordCount": 4,
    }


@pytest.mark.asyncio
async def test_list_posts_upstream_failure_is_500(api_client, post_repository) -> None:
    post_repository.fail = True

    response = await api_client.get("/posts")

    assert response.status_code == 500
    assert response.json() == {"error": "request processing failed"}


@pytest.mark.asyncio
async def test_get_post(api_client) -> None:
    response = await api_client.get("/posts/4")

    assert response.status_code == 200
    assert response.json()["authorName"] == "Desconocido"


@pytest.mark.asyncio
async def test_get_missing_post_is_404(api_client) -> None:
    response = await api_client.get("/posts/999")

    assert response.status_code == 404
    assert response.json() == {"message": "Post with id 999 not found"}


@pytest.mark.asyncio
async def test_list_posts_by_user(api_client) -> None:
    response = await api_client.get("/posts/user/1")

    assert response.status_code == 200
    assert [post["id"] for post in response.json()] == [1, 2, 3]


@pytest.mark.asyncio
async def test_create_post(api_client) -> None:
    response = await api_client.post(
        "/posts",
        json={"title": "New", "content": "one two three", "userId": 2},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 5
    assert body["authorName"] == "Ervin Howell"
    assert body["wordCount"] == 3


@pytest.mark.asyncio
async def test_create_post_requires_user_id(api_client) -> None:
    response = await api_client.post("/posts", json={"title": "New", "content": "x"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_post(api_client) -> None:
    response = await api_client.put("/posts/3", json={"title": "edited", "content": "now with words"})

    assert response.status_code == 200
    assert response.json()["wordCount"] == 3
    assert response.json()["authorName"] == "Leanne Graham"


@pytest.mark.asyncio
async def test_update_missing_post_is_404(api_client) -> None:
    response = await api_client.put("/posts/999", json={"title": "t", "content": "c"})

    assert response.status_code == 404
    assert response.json() == {"message": "Post with id 999 not found"}


@pytest.mark.asyncio
async def test_delete_post(api_client) -> None:
    first = await api_client.delete("/posts/1")
    second = await api_client.delete("/posts/1")

    assert first.status_code == 204
    assert first.content == b""
    assert second.status_code == 404


@pytest.mark.asyncio
async def test_delete_post_upstream_failure_is_500(api_client, post_repository) -> None:
    post_repository.fail = True

    response = await api_client.delete("/posts/1")

    assert response.status_code == 500
    assert response.json() == {"error": "request processing failed"}


@pytest.mark.asyncio
async def test_list_users(api_client) -> None:
    response = await api_client.get("/users")

    assert response.status_code == 200
    assert response.json()[0] == {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
    }


@pytest.mark.asyncio
async def test_get_missing_user_is_404(api_client) -> None:
    response = await api_client.get("/users/50")

    assert response.status_code == 404
    assert response.json() == {"message": "User with id 50 not found"}


@pytest.mark.asyncio
async def test_user_summary(api_client) -> None:
    response = await api_client.get("/users/1/summary")

    assert response.status_code == 200
    assert response.json() == {
        "id": 1,
        "name": "Leanne Graham",
        "email": "Sincere@april.biz",
        "totalPosts": 3,
    }


@pytest.mark.asyncio
async def test_user_summary_missing_user_is_404(api_client) -> None:
    response = await api_client.get("/users/8/summary")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_update_delete_user(api_client) -> None:
    created = await api_client.post(
        "/users",
        json={"name": "Clementine", "username": "Samantha", "email": "Nathan@yesenia.net"},
    )
    user_id = created.json()["id"]
    updated = await api_client.put(
        f"/users/{user_id}",
        json={"name": "Clementine B.", "username": "sam", "email": "c@b.net"},
    )
    deleted = await api_client.delete(f"/users/{user_id}")

    assert created.status_code == 201
    assert updated.status_code == 200
    assert updated.json()["username"] == "sam"
    assert deleted.status_code == 204


@pytest.mark.asyncio
async def test_update_missing_user_is_404(api_client) -> None:
    response = await api_client.put("/users/77", json={"name": "n", "username": "u", "email": "e"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_unexpected_error_uses_generic_500_body(post_service, user_service, post_repository) -> None:
    async def broken_list_all():
        raise RuntimeError("bug in the repository")

    post_repository.list_all = broken_list_all
    app.dependency_overrides[get_post_service] = lambda: post_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/posts")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "request processing failed"}

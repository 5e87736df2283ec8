"""Tests for UserService against an in-memory repository."""
import pytest

from posts_api.domain.exceptions import NotFoundError
from posts_api.domain.repositories.delete_outcome import DeleteOutcome


@pytest.mark.asyncio
async def test_list_all_users(user_service) -> None:
    users = await user_service.list_all_users()

    assert [(user.id, user.username) for user in users] == [(1, "Bret"), (2, "Antonette")]


@pytest.mark.asyncio
async def test_get_user(user_service) -> None:
    user = await user_service.get_user(2)
    assert user.email == "Shanna@melissa.tv"


@pytest.mark.asyncio
async def test_get_missing_user_is_absent(user_service) -> None:
    assert await user_service.get_user(404) is None


@pytest.mark.asyncio
async def test_create_user(user_service, user_repository) -> None:
    user = await user_service.create_user("Clementine Bauch", "Samantha", "Nathan@yesenia.net")

    assert user.id == 3
    assert user_repository.users[3].name == "Clementine Bauch"


@pytest.mark.asyncio
async def test_update_user_overwrites_all_fields(user_service, user_repository) -> None:
    user = await user_service.update_user(1, "Leanne G.", "bret2", "new@april.biz")

    assert (user.id, user.name, user.username, user.email) == (1, "Leanne G.", "bret2", "new@april.biz")
    assert user_repository.users[1].username == "bret2"


@pytest.mark.asyncio
async def test_update_missing_user_raises_not_found(user_service) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await user_service.update_user(9, "n", "u", "e")

    assert exc_info.value.resource == "User"


@pytest.mark.asyncio
async def test_delete_user_outcomes(user_service, user_repository) -> None:
    assert await user_service.delete_user(2) is DeleteOutcome.DELETED
    assert await user_service.delete_user(2) is DeleteOutcome.NOT_FOUND

    user_repository.fail = True
    assert await user_service.delete_user(1) is DeleteOutcome.UPSTREAM_FAILURE

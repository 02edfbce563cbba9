"""Unit tests for GetUserUseCase."""

import pytest

from gitusers.application.usecase.user import GetUserUseCase
from gitusers.application.usecase.user.get_user import GetUserRequest
from gitusers.persistence.repository.inmemory import InMemoryUserRepository
from tests.doubles import make_user


class TestGetUserUseCase:
    """Tests for GetUserUseCase."""

    @pytest.mark.asyncio
    async def test_returns_user(self):
        """Should return the stored user."""
        user_repo = InMemoryUserRepository()
        await user_repo.create(make_user("alice", display_name="Alice"))

        response = await GetUserUseCase(user_repo).execute(GetUserRequest(name="alice"))

        assert response.name == "alice"
        assert response.display_name == "Alice"

    @pytest.mark.asyncio
    async def test_missing_user_returns_none(self):
        """Should return None for a missing user."""
        use_case = GetUserUseCase(InMemoryUserRepository())

        assert await use_case.execute(GetUserRequest(name="ghost")) is None

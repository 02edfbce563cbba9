"""Unit tests for the GitHub client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from gitusers.adapter.github import MockGitHubClient, RealGitHubClient
from gitusers.domain.error import ProviderLookupFailedError
from gitusers.domain.service import UserInfoFound, UserInfoNotFound
from gitusers.domain.value import GitUser


def _response(status_code: int, payload: dict | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload or {}
    response.text = "error body"
    return response


class TestRealGitHubClient:
    """Tests for RealGitHubClient.user_info()."""

    @pytest.fixture
    def client(self):
        """Create client against the public API with a token."""
        return RealGitHubClient(api_url="https://api.github.com/", token="ghp_test")

    @pytest.mark.asyncio
    async def test_found_user_is_mapped(self, client):
        """Should map the GitHub profile onto a git user."""
        payload = {
            "login": "alice",
            "name": "Alice Smith",
            "email": None,
            "html_url": "https://github.com/alice",
            "avatar_url": "https://avatars.githubusercontent.com/u/1",
        }
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = MagicMock()
            mock_client.get = AsyncMock(return_value=_response(200, payload))
            mock_client_class.return_value.__aenter__.return_value = mock_client

            result = await client.user_info("alice")

        assert result == UserInfoFound(
            user=GitUser(
                login="alice",
                name="Alice Smith",
                email="",
                url="https://github.com/alice",
                avatar_url="https://avatars.githubusercontent.com/u/1",
            )
        )
        url = mock_client.get.call_args.args[0]
        headers = mock_client.get.call_args.kwargs["headers"]
        assert url == "https://api.github.com/users/alice"
        assert headers["Authorization"] == "Bearer ghp_test"

    @pytest.mark.asyncio
    async def test_missing_user_is_not_found(self, client):
        """A 404 should be reported as not found, not as an error."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = MagicMock()
            mock_client.get = AsyncMock(return_value=_response(404))
            mock_client_class.return_value.__aenter__.return_value = mock_client

            result = await client.user_info("ghost")

        assert result == UserInfoNotFound(login="ghost")

    @pytest.mark.asyncio
    async def test_error_status_raises(self, client):
        """Any other error status should fail the lookup."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = MagicMock()
            mock_client.get = AsyncMock(return_value=_response(500))
            mock_client_class.return_value.__aenter__.return_value = mock_client

            with pytest.raises(ProviderLookupFailedError) as exc_info:
                await client.user_info("alice")

        assert exc_info.value.kind == "github"
        assert exc_info.value.login == "alice"

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, client):
        """A success response that is not JSON should fail the lookup."""
        response = _response(200)
        response.json.side_effect = ValueError("Expecting value")
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = MagicMock()
            mock_client.get = AsyncMock(return_value=response)
            mock_client_class.return_value.__aenter__.return_value = mock_client

            with pytest.raises(ProviderLookupFailedError, match="invalid JSON"):
                await client.user_info("alice")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, client):
        """Connection failures should fail the lookup."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = MagicMock()
            mock_client.get = AsyncMock(side_effect=httpx.ConnectError("refused"))
            mock_client_class.return_value.__aenter__.return_value = mock_client

            with pytest.raises(ProviderLookupFailedError, match="refused"):
                await client.user_info("alice")

    @pytest.mark.asyncio
    async def test_anonymous_requests_have_no_authorization(self):
        """Without a token no Authorization header should be sent."""
        client = RealGitHubClient()
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = MagicMock()
            mock_client.get = AsyncMock(
                return_value=_response(200, {"login": "alice"})
            )
            mock_client_class.return_value.__aenter__.return_value = mock_client

            await client.user_info("alice")

        assert "Authorization" not in mock_client.get.call_args.kwargs["headers"]


class TestMockGitHubClient:
    """Tests for MockGitHubClient."""

    @pytest.mark.asyncio
    async def test_answers_from_registered_users(self):
        """Should find registered users and record every lookup."""
        client = MockGitHubClient()
        client.add_user(GitUser(login="alice", email="alice@co.io"))

        found = await client.user_info("alice")
        missing = await client.user_info("bob")

        assert found == UserInfoFound(user=GitUser(login="alice", email="alice@co.io"))
        assert missing == UserInfoNotFound(login="bob")
        assert client.calls == ["alice", "bob"]
        assert client.kind == "github"

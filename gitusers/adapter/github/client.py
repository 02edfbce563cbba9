"""GitHub REST API client implementation.

Looks users up through the public users endpoint.
"""

from typing import Optional

import httpx
import logfire

from gitusers.domain.error import ProviderLookupFailedError
from gitusers.domain.service.git_provider import (
    GitProviderClient,
    UserInfo,
    UserInfoFound,
    UserInfoNotFound,
)
from gitusers.domain.value import GitUser


class GitHubClient(GitProviderClient):
    """Base class for GitHub clients.

    Provides type distinction for dependency injection.
    """

    @property
    def kind(self) -> str:
        """Provider kind."""
        return "github"


class RealGitHubClient(GitHubClient):
    """GitHub client backed by the REST API."""

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        token: Optional[str] = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize GitHub client.

        Args:
            api_url: Base URL of the REST API (GitHub Enterprise uses /api/v3)
            token: Optional access token; anonymous requests are rate limited
            timeout: Request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def user_info(self, login: str) -> UserInfo:
        """Get the GitHub profile for a login.

        Args:
            login: GitHub login

        Returns:
            UserInfoFound with the profile, or UserInfoNotFound on 404

        Raises:
            ProviderLookupFailedError: If the request fails or GitHub answers
                with any other error status
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.api_url}/users/{login}",
                    headers=self._headers(),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("GitHub user info HTTP error", login=login, error=str(e))
            raise ProviderLookupFailedError(self.kind, login, str(e))

        if response.status_code == 404:
            return UserInfoNotFound(login=login)

        if response.status_code != 200:
            logfire.error(
                "GitHub user info request failed",
                login=login,
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderLookupFailedError(
                self.kind, login, f"status {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            logfire.error("GitHub user info is not JSON", login=login, error=str(e))
            raise ProviderLookupFailedError(self.kind, login, f"invalid JSON: {e}")

        return UserInfoFound(
            user=GitUser(
                login=data.get("login") or login,
                name=data.get("name"),
                email=data.get("email"),
                url=data.get("html_url"),
                avatar_url=data.get("avatar_url"),
            )
        )


class MockGitHubClient(GitHubClient):
    """Mock GitHub client for testing.

    Answers from an in-memory dictionary of users keyed by login without
    making real API calls.
    """

    def __init__(self, users: Optional[dict[str, GitUser]] = None) -> None:
        """Initialize mock client.

        Args:
            users: Known users by login
        """
        self.users = dict(users or {})
        self.calls: list[str] = []

    def add_user(self, user: GitUser) -> None:
        """Register a user the mock provider knows about."""
        self.users[user.login] = user

    async def user_info(self, login: str) -> UserInfo:
        """Return the registered user, or not found."""
        self.calls.append(login)
        user = self.users.get(login)
        if user is None:
            return UserInfoNotFound(login=login)
        return UserInfoFound(user=user)

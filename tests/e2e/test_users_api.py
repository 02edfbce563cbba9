"""End-to-end tests for the user resolution endpoints."""

import pytest
from fastapi.testclient import TestClient

from gitusers.interface.api.app import create_app
from gitusers.util.di.container import setup_di
from tests.di import build_test_container

GITHUB_KEY = "gitusers.io/git-github-userid"


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


class TestHealthEndpoint:
    """End-to-end tests for the health check."""

    def test_health(self, client):
        """Should report the service as healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestUsersEndpoints:
    """End-to-end tests for user API endpoints.

    Note: These tests focus on the HTTP API interface layer.
    Resolution rules are covered by the resolver unit tests.
    """

    def test_resolve_creates_then_finds_user(self, client):
        """Should create an unknown user and find it again afterwards."""
        # Act
        created = client.post(
            "/users/resolve", json={"login": "alice", "email": "alice@co.io"}
        )
        again = client.post("/users/resolve", json={"login": "alice"})

        # Assert
        assert created.status_code == 200
        assert created.json()["name"] == "alice"
        assert created.json()["accounts"] == [{"provider": GITHUB_KEY, "id": "alice"}]
        assert again.status_code == 200
        assert again.json()["name"] == "alice"
        assert again.json()["labels"] == {GITHUB_KEY: "alice"}

    def test_get_user(self, client):
        """Should return a resolved user by name."""
        client.post("/users/resolve", json={"login": "bob"})

        response = client.get("/users/bob")

        assert response.status_code == 200
        assert response.json()["login"] == "bob"

    def test_get_nonexistent_user(self, client):
        """Should return 404 for nonexistent user."""
        response = client.get("/users/nonexistent")

        assert response.status_code == 404

    def test_empty_identity_is_rejected(self, client):
        """Should return 422 when no identity field is given."""
        response = client.post("/users/resolve", json={})

        assert response.status_code == 422

    def test_ambiguous_email_is_a_conflict(self, client):
        """Should return 409 listing every candidate."""
        # Arrange - two users sharing an email
        client.post("/users/resolve", json={"login": "alice", "email": "team@co.io"})
        client.post("/users/resolve", json={"login": "bob", "email": "team@co.io"})

        # Act
        response = client.post(
            "/users/resolve", json={"name": "Team", "email": "team@co.io"}
        )

        # Assert
        assert response.status_code == 409
        body = response.json()
        assert body["stage"] == "email"
        assert sorted(body["candidates"]) == ["alice", "bob"]

    def test_backfill_email(self, client):
        """Should copy the author's email from the pull request commits."""
        client.post("/users/resolve", json={"login": "carol"})

        response = client.post(
            "/users/carol/backfill-email",
            json={
                "pull_request": {"owner": "acme", "repo": "widgets", "number": 3},
                "commits": [
                    {"sha": "a1", "author": {"login": "carol", "email": "carol@co.io"}}
                ],
            },
        )

        assert response.status_code == 200
        assert response.json()["email"] == "carol@co.io"

    def test_backfill_unknown_user(self, client):
        """Should return 404 when the user does not exist."""
        response = client.post(
            "/users/ghost/backfill-email",
            json={"pull_request": {"owner": "acme", "repo": "widgets", "number": 3}},
        )

        assert response.status_code == 404

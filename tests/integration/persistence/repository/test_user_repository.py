"""Integration tests for PostgresUserRepository.

Requires a migrated PostgreSQL database reachable through DATABASE__URL;
skipped otherwise.
"""

import os
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from gitusers.domain.error import UserConflictError
from gitusers.domain.value import Namespace
from gitusers.persistence.repository import PostgresUserRepository
from tests.doubles import GITHUB_KEY, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="DATABASE__URL not set"
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def user_repo(integration_env):
    """Repository scoped to a fresh namespace."""
    session = await integration_env.get(AsyncSession)
    return PostgresUserRepository(session, Namespace(f"test-{uuid4().hex[:8]}"))


class TestPostgresUserRepository:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, user_repo):
        """Should read back a created user."""
        user = make_user(
            "alice", email="alice@co.io", accounts=[(GITHUB_KEY, "alice")]
        )

        created = await user_repo.create(user)
        found = await user_repo.get("alice")

        assert created.namespace == user_repo.namespace
        assert found.spec == user.spec

    @pytest.mark.asyncio
    async def test_list_by_label(self, user_repo):
        """Label selectors should match with JSONB containment."""
        await user_repo.create(make_user("alice", labels={GITHUB_KEY: "alice"}))
        await user_repo.create(make_user("bob", labels={GITHUB_KEY: "bob"}))

        matches = await user_repo.list({GITHUB_KEY: "alice"})
        everyone = await user_repo.list()

        assert [u.name for u in matches] == ["alice"]
        assert [u.name for u in everyone] == ["alice", "bob"]

    @pytest.mark.asyncio
    async def test_update_persists_labels(self, user_repo):
        """Should store new labels on update."""
        await user_repo.create(make_user("alice"))

        await user_repo.update(make_user("alice", labels={GITHUB_KEY: "alice"}))

        found = await user_repo.get("alice")
        assert found.labels == {GITHUB_KEY: "alice"}

    @pytest.mark.asyncio
    async def test_duplicate_create_conflicts(self, user_repo):
        """Should reject a second record with the same name."""
        await user_repo.create(make_user("alice"))

        with pytest.raises(UserConflictError):
            await user_repo.create(make_user("alice"))

        # Failed insert leaves the session unusable for the final commit
        await user_repo.session.rollback()

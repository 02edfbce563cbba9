"""Unit tests for persistence mappers."""

from datetime import datetime

from gitusers.persistence.mappers import row_to_user, user_to_dict
from tests.doubles import GITHUB_KEY, make_user


class TestMappers:
    """Tests for row and model conversion."""

    def test_user_to_dict_flattens_details(self):
        """Should store details as columns and accounts as JSON."""
        user = make_user(
            "alice",
            email="alice@co.io",
            labels={GITHUB_KEY: "alice"},
            accounts=[(GITHUB_KEY, "alice")],
            display_name="Alice",
            login="alice",
        )

        row = user_to_dict(user)

        assert row["namespace"] == "jx"
        assert row["display_name"] == "Alice"
        assert row["labels"] == {GITHUB_KEY: "alice"}
        assert row["accounts"] == [{"provider": GITHUB_KEY, "id": "alice"}]

    def test_row_to_user_treats_nulls_as_empty(self):
        """Should map NULL columns to empty strings."""
        now = datetime.now()
        row = {
            "namespace": "jx",
            "name": "bob",
            "labels": None,
            "login": None,
            "display_name": "Bob",
            "email": None,
            "url": None,
            "avatar_url": None,
            "accounts": None,
            "created_at": now,
            "updated_at": now,
        }

        user = row_to_user(row)

        assert user.name == "bob"
        assert user.labels == {}
        assert user.spec.name == "Bob"
        assert user.spec.email == ""
        assert user.spec.accounts == []

    def test_row_to_user_reads_written_row(self):
        """A written row should read back as the same user."""
        user = make_user("alice", labels={"team": "a"}, accounts=[(GITHUB_KEY, "alice")])

        assert row_to_user(user_to_dict(user)) == user

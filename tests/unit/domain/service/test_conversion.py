"""Unit tests for conversions between git users and user records."""

from gitusers.domain.service.conversion import (
    add_account_reference,
    create_user,
    git_user_login,
    git_user_to_user,
    user_to_git_user,
    with_email,
    with_label,
)
from gitusers.domain.value import AccountReference, GitUser, Namespace, UserName
from tests.doubles import GITHUB_KEY, make_user


class TestGitUserToUser:
    """Tests for git_user_to_user()."""

    def test_converts_fields_and_links_account(self):
        """Should copy every field and link the provider account."""
        git_user = GitUser(
            login="Alice_S",
            name="Alice",
            email="alice@co.io",
            url="https://example.com/alice",
            avatar_url="https://example.com/a.png",
        )

        user = git_user_to_user(Namespace("jx"), git_user, GITHUB_KEY)

        assert user.name == "alice-s"
        assert user.namespace == "jx"
        assert user.spec.login == "Alice_S"
        assert user.spec.name == "Alice"
        assert user.spec.email == "alice@co.io"
        assert user.spec.url == "https://example.com/alice"
        assert user.spec.avatar_url == "https://example.com/a.png"
        assert user.spec.accounts == [
            AccountReference(provider=GITHUB_KEY, id="Alice_S")
        ]

    def test_no_account_without_login(self):
        """Should not link an account with an empty id."""
        user = git_user_to_user(
            Namespace("jx"), GitUser(email="bob@co.io"), GITHUB_KEY
        )

        assert user.name == "bob"
        assert user.spec.accounts == []


class TestUserToGitUser:
    """Tests for user_to_git_user()."""

    def test_uses_given_login(self):
        """Should take the login from the caller and details from the user."""
        user = make_user("alice", email="alice@co.io", display_name="Alice")

        git_user = user_to_git_user("alice-gh", user)

        assert git_user == GitUser(login="alice-gh", name="Alice", email="alice@co.io")


class TestAccountReferences:
    """Tests for account and label helpers."""

    def test_add_account_reference_appends(self):
        """Should append an account for a new provider."""
        user = make_user("alice", accounts=[("gitusers.io/git-gitlab-userid", "al")])

        updated = add_account_reference(user, GITHUB_KEY, "alice")

        assert updated.account_id(GITHUB_KEY) == "alice"
        assert len(updated.spec.accounts) == 2
        assert len(user.spec.accounts) == 1

    def test_add_account_reference_keeps_one_per_provider(self):
        """Should leave the user untouched when the provider is already linked."""
        user = make_user("alice", accounts=[(GITHUB_KEY, "alice")])

        assert add_account_reference(user, GITHUB_KEY, "other") is user

    def test_git_user_login(self):
        """Should return the linked login, or an empty string."""
        linked = make_user("alice", accounts=[(GITHUB_KEY, "alice")])

        assert git_user_login(linked, GITHUB_KEY) == "alice"
        assert git_user_login(make_user("bob"), GITHUB_KEY) == ""

    def test_with_label_keeps_other_labels(self):
        """Should add the label without dropping existing ones."""
        user = make_user("alice", labels={"team": "core"})

        updated = with_label(user, GITHUB_KEY, "alice")

        assert updated.labels == {"team": "core", GITHUB_KEY: "alice"}
        assert user.labels == {"team": "core"}

    def test_with_email_replaces_email(self):
        """Should return a copy with the new email."""
        user = make_user("alice", email="old@co.io")

        assert with_email(user, "new@co.io").spec.email == "new@co.io"
        assert user.spec.email == "old@co.io"

    def test_create_user_has_no_accounts(self):
        """Should build a record with details and no linked accounts."""
        user = create_user(Namespace("jx"), UserName("carol"), display_name="Carol")

        assert user.spec.name == "Carol"
        assert user.spec.accounts == []
        assert user.labels == {}

"""Type conversion between git users and identity records."""

from collections.abc import Collection
from datetime import datetime

from gitusers.domain.model.user import User, UserDetails
from gitusers.domain.value import (
    AccountReference,
    GitUser,
    Namespace,
    UserName,
    user_name_for,
)


def create_user(
    namespace: Namespace,
    name: UserName,
    login: str = "",
    display_name: str = "",
    email: str = "",
    url: str = "",
    avatar_url: str = "",
) -> User:
    """Build a new user record with no linked accounts."""
    return User(
        name=name,
        namespace=namespace,
        spec=UserDetails(
            login=login,
            name=display_name,
            email=email,
            url=url,
            avatar_url=avatar_url,
        ),
    )


def add_account_reference(user: User, provider: str, account_id: str) -> User:
    """Link an external account to a user.

    A user holds at most one account per provider; an existing reference for
    the provider is left untouched.
    """
    if user.account_id(provider) is not None:
        return user
    accounts = [*user.spec.accounts, AccountReference(provider=provider, id=account_id)]
    return user.model_copy(
        update={
            "spec": user.spec.model_copy(update={"accounts": accounts}),
            "updated_at": datetime.now(),
        }
    )


def with_label(user: User, key: str, value: str) -> User:
    """Return a copy of the user with one label set."""
    return user.model_copy(
        update={"labels": {**user.labels, key: value}, "updated_at": datetime.now()}
    )


def with_email(user: User, email: str) -> User:
    """Return a copy of the user with its email replaced."""
    return user.model_copy(
        update={
            "spec": user.spec.model_copy(update={"email": email}),
            "updated_at": datetime.now(),
        }
    )


def git_user_to_user(
    namespace: Namespace,
    git_user: GitUser,
    provider_key: str,
    taken: Collection[str] = (),
) -> User:
    """Convert a git user into a new user record.

    The record gets a name not in ``taken``. The git provider account is
    attached as the record's only account reference when the git user has
    a login.
    """
    user = create_user(
        namespace,
        user_name_for(git_user, taken),
        login=git_user.login,
        display_name=git_user.name,
        email=git_user.email,
        url=git_user.url,
        avatar_url=git_user.avatar_url,
    )
    if git_user.login:
        user = add_account_reference(user, provider_key, git_user.login)
    return user


def user_to_git_user(login: str, user: User) -> GitUser:
    """Convert a user record into the git user it represents for a login."""
    return GitUser(
        login=login,
        name=user.spec.name,
        email=user.spec.email,
        url=user.spec.url,
        avatar_url=user.spec.avatar_url,
    )


def git_user_login(user: User, provider_key: str) -> str:
    """Return the user's login on a git provider, or an empty string."""
    return user.account_id(provider_key) or ""
